from docwatch.logging.logger import Log
from docwatch.storage.base import BaseStorage
from docwatch.storage.models import (
    GOOGLE_APPS_MIME_PREFIX,
    GOOGLE_DOC_MIME_TYPE,
    PDF_MIME_TYPE,
    Document,
)


class ContentExtractor:
    """Turns a stored document into plain text, dispatching on its kind.

    - PDF (by mime type or ``.pdf`` name): OCR into a temporary document,
      read it, delete the temporary copy. Conversion errors propagate.
    - Native rich-text document: read its text, then delete the source.
    - Any other platform-native type: unsupported, empty text.
    - Everything else: raw bytes decoded as UTF-8.

    Soft failures return ``""`` and are logged. A source is only ever
    deleted after its text has been read in full.
    """

    def __init__(self, storage: BaseStorage, ocr_language: str) -> None:
        self._storage = storage
        self._ocr_language = ocr_language

    def extract(self, document: Document) -> str:
        if self._is_pdf(document):
            text = self._extract_pdf(document)
        elif document.mime_type == GOOGLE_DOC_MIME_TYPE:
            text = self._extract_native_document(document)
        elif document.mime_type.startswith(GOOGLE_APPS_MIME_PREFIX):
            Log.warning(
                f"Skipping {document.name} (unhandled native type: {document.mime_type})"
            )
            return ""
        else:
            text = self._decode_bytes(document)

        if text:
            Log.debug(f"Extracted content from {document.name}: {text}")
            Log.info(f"Extracted {len(text)} chars from {document.name}")
        return text

    @staticmethod
    def _is_pdf(document: Document) -> bool:
        return document.mime_type == PDF_MIME_TYPE or document.name.lower().endswith(".pdf")

    def _extract_pdf(self, document: Document) -> str:
        try:
            temp_id = self._storage.convert_with_ocr(document.id, self._ocr_language)
        except Exception as exc:
            Log.error(f"Error converting PDF {document.name} with OCR: {exc}")
            raise
        try:
            text = self._storage.read_document_text(temp_id)
        finally:
            self._remove(temp_id, "temporary OCR document")
        return text

    def _extract_native_document(self, document: Document) -> str:
        try:
            text = self._storage.read_document_text(document.id)
        except Exception as exc:
            Log.error(f"Error reading document {document.name}: {exc}")
            return ""
        self._remove(document.id, "original document")
        return text

    def _decode_bytes(self, document: Document) -> str:
        try:
            return self._storage.read_bytes(document.id).decode("utf-8-sig")
        except Exception as exc:
            Log.error(f"Error reading content of {document.name}: {exc}")
            return ""

    def _remove(self, file_id: str, label: str) -> None:
        try:
            self._storage.delete_file(file_id)
        except Exception as exc:
            Log.error(f"Error removing {label} {file_id}: {exc}")
            return
        Log.info(f"Removed {label}: {file_id}")
