from abc import ABC, abstractmethod

from docwatch.storage.models import Document, Folder


class BaseStorage(ABC):
    """Contract for the hierarchical file store the pipeline reads and writes.

    All methods raise StorageError (or a subclass) on backend failure.
    """

    @abstractmethod
    def list_files(self, folder_id: str) -> list[Document]:
        """Return the non-folder children of a folder, in backend order."""

    @abstractmethod
    def list_folders(self, folder_id: str) -> list[Folder]:
        """Return the direct subfolders of a folder."""

    @abstractmethod
    def create_folder(self, parent_id: str, name: str) -> Folder:
        """Create a subfolder and return it."""

    @abstractmethod
    def read_bytes(self, file_id: str) -> bytes:
        """Return the raw content of a file."""

    @abstractmethod
    def read_document_text(self, file_id: str) -> str:
        """Return the plain text of a native rich-text document."""

    @abstractmethod
    def convert_with_ocr(self, file_id: str, language: str) -> str:
        """OCR a scanned file into a temporary rich-text document.

        Returns:
            Id of the temporary document. The caller deletes it.
        """

    @abstractmethod
    def create_file(self, folder_id: str, name: str, content: bytes, mime_type: str) -> str:
        """Create a new file in a folder and return its id."""

    @abstractmethod
    def delete_file(self, file_id: str) -> None:
        """Permanently remove a file."""

    @abstractmethod
    def file_link(self, file_id: str) -> str:
        """Return a stable, directly dereferenceable link to a file."""
