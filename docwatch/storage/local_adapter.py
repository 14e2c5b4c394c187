import mimetypes
import uuid
from pathlib import Path, PurePosixPath

from docwatch.logging.logger import Log
from docwatch.pdf.base import BasePdfExtractor
from docwatch.storage.base import BaseStorage
from docwatch.storage.exceptions import StorageError, StorageNotFoundError
from docwatch.storage.models import Document, Folder


class LocalStorage(BaseStorage):
    """Filesystem backend. Ids are POSIX paths relative to ``root``.

    OCR conversion runs the configured PDF engine and keeps the result in a
    hidden temp directory under the root until the caller deletes it.
    """

    TMP_DIR = ".docwatch-tmp"

    def __init__(self, root: Path, pdf_extractor: BasePdfExtractor) -> None:
        self._root = root
        self._pdf_extractor = pdf_extractor

    def list_files(self, folder_id: str) -> list[Document]:
        folder = self._resolve_dir(folder_id)
        return [
            Document(id=self._to_id(path), name=path.name, mime_type=self._guess_mime(path))
            for path in sorted(folder.iterdir())
            if path.is_file() and not path.name.startswith(".")
        ]

    def list_folders(self, folder_id: str) -> list[Folder]:
        folder = self._resolve_dir(folder_id)
        return [
            Folder(id=self._to_id(path), name=path.name)
            for path in sorted(folder.iterdir())
            if path.is_dir() and path.name != self.TMP_DIR
        ]

    def create_folder(self, parent_id: str, name: str) -> Folder:
        path = self._resolve_dir(parent_id) / name
        try:
            path.mkdir()
        except OSError as exc:
            raise StorageError(f"Cannot create folder {path}: {exc}") from exc
        return Folder(id=self._to_id(path), name=name)

    def read_bytes(self, file_id: str) -> bytes:
        path = self._resolve_file(file_id)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def read_document_text(self, file_id: str) -> str:
        return self.read_bytes(file_id).decode("utf-8")

    def convert_with_ocr(self, file_id: str, language: str) -> str:
        text = self._pdf_extractor.extract(self.read_bytes(file_id))
        tmp_dir = self._root / self.TMP_DIR
        tmp_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = tmp_dir / f"{uuid.uuid4().hex}.txt"
        tmp_path.write_text(text, encoding="utf-8")
        Log.debug(f"Converted {file_id} to {tmp_path.name} (language hint {language!r} unused)")
        return self._to_id(tmp_path)

    def create_file(self, folder_id: str, name: str, content: bytes, mime_type: str) -> str:
        path = self._resolve_dir(folder_id) / name
        try:
            path.write_bytes(content)
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc
        return self._to_id(path)

    def delete_file(self, file_id: str) -> None:
        path = self._resolve_file(file_id)
        try:
            path.unlink()
        except OSError as exc:
            raise StorageError(f"Cannot delete {path}: {exc}") from exc

    def file_link(self, file_id: str) -> str:
        return (self._root / file_id).resolve().as_uri()

    def _resolve_dir(self, folder_id: str) -> Path:
        path = self._root / folder_id
        if not path.is_dir():
            raise StorageNotFoundError(f"Folder not found: {folder_id}")
        return path

    def _resolve_file(self, file_id: str) -> Path:
        path = self._root / file_id
        if not path.is_file():
            raise StorageNotFoundError(f"File not found: {file_id}")
        return path

    def _to_id(self, path: Path) -> str:
        return str(PurePosixPath(path.relative_to(self._root)))

    @staticmethod
    def _guess_mime(path: Path) -> str:
        mime_type, _encoding = mimetypes.guess_type(path.name)
        return mime_type or "application/octet-stream"
