import io
from typing import Any

from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseDownload, MediaIoBaseUpload
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from docwatch.logging.logger import Log
from docwatch.storage.base import BaseStorage
from docwatch.storage.exceptions import StorageError, StorageNotFoundError
from docwatch.storage.google_services import escape_query_value
from docwatch.storage.models import (
    GOOGLE_DOC_MIME_TYPE,
    GOOGLE_FOLDER_MIME_TYPE,
    TEXT_MIME_TYPE,
    Document,
    Folder,
)

LIST_FIELDS = "nextPageToken, files(id, name, mimeType)"


def _wrap_http_error(exc: HttpError, action: str) -> StorageError:
    if exc.resp.status == 404:
        return StorageNotFoundError(f"{action}: not found ({exc})")
    return StorageError(f"{action}: {exc}")


class DriveStorage(BaseStorage):
    """Google Drive v3 backend.

    Read-only calls are retried with exponential backoff on HttpError.
    Calls that create files are not retried, so a flaky request can never
    produce duplicate artifacts.
    """

    LINK_TEMPLATE = "https://drive.google.com/file/d/{file_id}/view?usp=sharing"

    def __init__(self, drive_service: Any, retry_attempts: int = 3, page_size: int = 100) -> None:
        self._service = drive_service
        self._page_size = page_size
        self._execute_read = retry(
            retry=retry_if_exception_type(HttpError),
            stop=stop_after_attempt(retry_attempts),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        )(self._execute)

    def list_files(self, folder_id: str) -> list[Document]:
        query = (
            f"'{escape_query_value(folder_id)}' in parents and trashed = false "
            f"and mimeType != '{GOOGLE_FOLDER_MIME_TYPE}'"
        )
        return [
            Document(id=item["id"], name=item["name"], mime_type=item["mimeType"])
            for item in self._list(query, f"List files in {folder_id}")
        ]

    def list_folders(self, folder_id: str) -> list[Folder]:
        query = (
            f"'{escape_query_value(folder_id)}' in parents and trashed = false "
            f"and mimeType = '{GOOGLE_FOLDER_MIME_TYPE}'"
        )
        return [
            Folder(id=item["id"], name=item["name"])
            for item in self._list(query, f"List folders in {folder_id}")
        ]

    def create_folder(self, parent_id: str, name: str) -> Folder:
        body = {"name": name, "mimeType": GOOGLE_FOLDER_MIME_TYPE, "parents": [parent_id]}
        try:
            created = self._execute(self._service.files().create(body=body, fields="id, name"))
        except HttpError as exc:
            raise _wrap_http_error(exc, f"Create folder {name!r}") from exc
        return Folder(id=created["id"], name=created["name"])

    def read_bytes(self, file_id: str) -> bytes:
        request = self._service.files().get_media(fileId=file_id)
        buffer = io.BytesIO()
        try:
            downloader = MediaIoBaseDownload(buffer, request)
            done = False
            while not done:
                _status, done = downloader.next_chunk(num_retries=2)
        except HttpError as exc:
            raise _wrap_http_error(exc, f"Download {file_id}") from exc
        return buffer.getvalue()

    def read_document_text(self, file_id: str) -> str:
        request = self._service.files().export(fileId=file_id, mimeType=TEXT_MIME_TYPE)
        try:
            content = self._execute_read(request)
        except HttpError as exc:
            raise _wrap_http_error(exc, f"Export {file_id} as text") from exc
        if isinstance(content, bytes):
            return content.decode("utf-8-sig")
        return str(content)

    def convert_with_ocr(self, file_id: str, language: str) -> str:
        request = self._service.files().copy(
            fileId=file_id,
            body={"mimeType": GOOGLE_DOC_MIME_TYPE},
            ocrLanguage=language,
            fields="id",
        )
        try:
            converted = self._execute(request)
        except HttpError as exc:
            raise _wrap_http_error(exc, f"OCR conversion of {file_id}") from exc
        Log.debug(f"Converted {file_id} to temporary Google Doc {converted['id']}")
        return str(converted["id"])

    def create_file(self, folder_id: str, name: str, content: bytes, mime_type: str) -> str:
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=mime_type, resumable=False)
        body = {"name": name, "parents": [folder_id]}
        try:
            created = self._execute(
                self._service.files().create(body=body, media_body=media, fields="id")
            )
        except HttpError as exc:
            raise _wrap_http_error(exc, f"Create file {name!r}") from exc
        return str(created["id"])

    def delete_file(self, file_id: str) -> None:
        try:
            self._execute(self._service.files().delete(fileId=file_id))
        except HttpError as exc:
            raise _wrap_http_error(exc, f"Delete {file_id}") from exc

    def file_link(self, file_id: str) -> str:
        return self.LINK_TEMPLATE.format(file_id=file_id)

    def _list(self, query: str, action: str) -> list[dict[str, str]]:
        items: list[dict[str, str]] = []
        page_token: str | None = None
        while True:
            request = self._service.files().list(
                q=query,
                fields=LIST_FIELDS,
                pageSize=self._page_size,
                pageToken=page_token,
            )
            try:
                response = self._execute_read(request)
            except HttpError as exc:
                raise _wrap_http_error(exc, action) from exc
            items.extend(response.get("files", []))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    @staticmethod
    def _execute(request: Any) -> Any:
        return request.execute()
