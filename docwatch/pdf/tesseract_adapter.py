import pytesseract
from pdf2image import convert_from_bytes

from docwatch.pdf.base import BasePdfExtractor
from docwatch.pdf.exceptions import PdfExtractionError


class TesseractAdapter(BasePdfExtractor):
    """OCRs scanned PDFs: rasterises each page and runs Tesseract on it."""

    def __init__(self, language: str = "heb", dpi: int = 300) -> None:
        self._language = language
        self._dpi = dpi

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            images = convert_from_bytes(pdf_bytes, dpi=self._dpi)
            pages = [
                pytesseract.image_to_string(image, lang=self._language)
                for image in images
            ]
        except Exception as exc:
            raise PdfExtractionError(f"tesseract OCR failed: {exc}") from exc
        return "\n".join(pages).strip()
