from collections.abc import Sequence
from typing import Any

from googleapiclient.errors import HttpError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from docwatch.logging.logger import Log
from docwatch.storage.exceptions import StorageError
from docwatch.storage.google_services import escape_query_value
from docwatch.storage.models import GOOGLE_SHEET_MIME_TYPE
from docwatch.tables.base import BaseTableStore
from docwatch.tables.models import TableRef


class SheetsTableStore(BaseTableStore):
    """Google Sheets backend: one spreadsheet per table, rows on its first sheet."""

    LINK_TEMPLATE = "https://docs.google.com/spreadsheets/d/{table_id}/edit?usp=sharing"

    def __init__(self, drive_service: Any, sheets_service: Any, retry_attempts: int = 3) -> None:
        self._drive = drive_service
        self._sheets = sheets_service
        self._execute_read = retry(
            retry=retry_if_exception_type(HttpError),
            stop=stop_after_attempt(retry_attempts),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        )(lambda request: request.execute())

    def find_table(self, folder_id: str, name: str) -> TableRef | None:
        query = (
            f"'{escape_query_value(folder_id)}' in parents and trashed = false "
            f"and mimeType = '{GOOGLE_SHEET_MIME_TYPE}' "
            f"and name = '{escape_query_value(name)}'"
        )
        try:
            response = self._execute_read(
                self._drive.files().list(q=query, fields="files(id, name)", pageSize=10)
            )
        except HttpError as exc:
            raise StorageError(f"Search for spreadsheet {name!r}: {exc}") from exc
        for item in response.get("files", []):
            if item["name"] == name:
                return TableRef(id=item["id"], name=item["name"])
        return None

    def create_table(self, folder_id: str, name: str) -> TableRef:
        body = {"name": name, "mimeType": GOOGLE_SHEET_MIME_TYPE, "parents": [folder_id]}
        try:
            created = self._drive.files().create(body=body, fields="id, name").execute()
        except HttpError as exc:
            raise StorageError(f"Create spreadsheet {name!r}: {exc}") from exc
        return TableRef(id=created["id"], name=created["name"])

    def append_row(self, table: TableRef, cells: Sequence[str]) -> None:
        request = self._sheets.spreadsheets().values().append(
            spreadsheetId=table.id,
            range="A1",
            valueInputOption="RAW",
            insertDataOption="INSERT_ROWS",
            body={"values": [list(cells)]},
        )
        try:
            request.execute()
        except HttpError as exc:
            raise StorageError(f"Append row to {table.name!r}: {exc}") from exc
        Log.debug(f"Appended {len(cells)} cells to spreadsheet {table.id}")

    def table_link(self, table: TableRef) -> str:
        return self.LINK_TEMPLATE.format(table_id=table.id)
