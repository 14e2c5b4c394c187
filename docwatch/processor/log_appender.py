from docwatch.logging.logger import Log
from docwatch.processor.models import NOT_AVAILABLE, ExtractionResult, LogRow
from docwatch.storage.base import BaseStorage
from docwatch.storage.models import Document, Folder
from docwatch.tables.base import BaseTableStore
from docwatch.tables.models import TableRef


class LogAppender:
    """Maintains the Extraction Log table in the output folder."""

    LOG_NAME = "Extraction Log"

    def __init__(self, storage: BaseStorage, tables: BaseTableStore) -> None:
        self._storage = storage
        self._tables = tables

    def ensure_log(self, folder: Folder) -> TableRef:
        """Return the existing log in ``folder`` or create it with its header row."""
        table = self._tables.find_table(folder.id, self.LOG_NAME)
        if table is not None:
            Log.info(f"Found existing log: {table.name} ({table.id})")
            return table
        table = self._tables.create_table(folder.id, self.LOG_NAME)
        self._tables.append_row(table, list(LogRow.HEADER))
        Log.info(f"Created new log: {table.name} ({table.id})")
        return table

    def build_row(
        self,
        document: Document,
        text: str,
        extracted: ExtractionResult,
        artifact_link: str,
    ) -> LogRow:
        return LogRow(
            file_name=document.name,
            original_link=self._storage.file_link(document.id),
            artifact_link=artifact_link,
            text=text,
            sum=extracted.get("sum", NOT_AVAILABLE),
            num=extracted.get("num", NOT_AVAILABLE),
            date=extracted.get("date", NOT_AVAILABLE),
        )

    def append_row(
        self,
        table: TableRef,
        document: Document,
        text: str,
        extracted: ExtractionResult,
        artifact_link: str,
    ) -> None:
        """Append one row for the document. Errors propagate to the caller."""
        row = self.build_row(document, text, extracted, artifact_link)
        self._tables.append_row(table, row.as_cells())
        Log.info(f"Appended log row for {document.name} to {self._tables.table_link(table)}")
