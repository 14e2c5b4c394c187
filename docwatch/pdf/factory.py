from docwatch.config.settings import Settings
from docwatch.pdf.base import BasePdfExtractor
from docwatch.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docwatch.pdf.pymupdf_adapter import PyMuPdfAdapter
from docwatch.pdf.tesseract_adapter import TesseractAdapter


class PdfExtractorFactory:
    """Creates the PDF text engine named by settings.pdf_engine."""

    ENGINES = ("pdfplumber", "pymupdf", "tesseract")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        if engine == "pdfplumber":
            return PdfPlumberAdapter()
        if engine == "pymupdf":
            return PyMuPdfAdapter()
        if engine == "tesseract":
            return TesseractAdapter(language=settings.tesseract_language)
        raise ValueError(
            f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
