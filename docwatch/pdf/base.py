from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for engines that turn PDF bytes into plain text."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Return the text of every page, joined by newlines and stripped.

        Raises:
            PdfExtractionError: if the bytes cannot be read as a PDF.
        """
