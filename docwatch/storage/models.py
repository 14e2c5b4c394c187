from dataclasses import dataclass

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"
GOOGLE_APPS_MIME_PREFIX = "application/vnd.google-apps"
GOOGLE_DOC_MIME_TYPE = "application/vnd.google-apps.document"
GOOGLE_FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
GOOGLE_SHEET_MIME_TYPE = "application/vnd.google-apps.spreadsheet"


@dataclass(frozen=True)
class Document:
    """A file listed in the watched folder. Bytes are fetched on demand."""

    id: str
    name: str
    mime_type: str


@dataclass(frozen=True)
class Folder:
    id: str
    name: str
