from unittest.mock import MagicMock

import pytest

from docwatch.processor.log_appender import LogAppender
from docwatch.processor.models import NOT_AVAILABLE, LogRow
from docwatch.storage.base import BaseStorage
from docwatch.storage.exceptions import StorageError
from docwatch.storage.models import Document, Folder
from docwatch.tables.base import BaseTableStore
from docwatch.tables.models import TableRef

FOLDER = Folder(id="out", name="processed")
TABLE = TableRef(id="t1", name="Extraction Log")


def _make_appender() -> tuple[LogAppender, MagicMock, MagicMock]:
    storage = MagicMock(spec=BaseStorage)
    storage.file_link.side_effect = lambda file_id: f"link://{file_id}"
    tables = MagicMock(spec=BaseTableStore)
    return LogAppender(storage, tables), storage, tables


class TestEnsureLog:
    def test_returns_existing_log(self) -> None:
        appender, _storage, tables = _make_appender()
        tables.find_table.return_value = TABLE

        assert appender.ensure_log(FOLDER) == TABLE
        tables.find_table.assert_called_once_with("out", "Extraction Log")
        tables.create_table.assert_not_called()
        tables.append_row.assert_not_called()

    def test_creates_log_with_header(self) -> None:
        appender, _storage, tables = _make_appender()
        tables.find_table.return_value = None
        tables.create_table.return_value = TABLE

        assert appender.ensure_log(FOLDER) == TABLE
        tables.create_table.assert_called_once_with("out", "Extraction Log")
        tables.append_row.assert_called_once_with(
            TABLE,
            ["File Name", "Original PDF link", "Text file link", "Extracted text", "Sum", "Num", "Date"],
        )


class TestAppendRow:
    def test_appends_cells_in_header_order(self) -> None:
        appender, _storage, tables = _make_appender()
        document = Document(id="doc-1", name="inv.pdf", mime_type="application/pdf")
        extracted = {"sum": "10.50", "num": "77", "date": "01/02/2023"}

        appender.append_row(TABLE, document, "text", extracted, "link://art")

        tables.append_row.assert_called_once_with(
            TABLE,
            ["inv.pdf", "link://doc-1", "link://art", "text", "10.50", "77", "01/02/2023"],
        )

    def test_date_cell_comes_from_date_field(self) -> None:
        appender, _storage, _tables = _make_appender()
        document = Document(id="doc-1", name="inv.pdf", mime_type="application/pdf")

        row = appender.build_row(document, "t", {"sum": "1", "num": "2", "date": "03/04/21"}, "")

        assert row.date == "03/04/21"

    def test_missing_fields_become_not_available(self) -> None:
        appender, _storage, _tables = _make_appender()
        document = Document(id="doc-1", name="inv.pdf", mime_type="application/pdf")

        row = appender.build_row(document, "t", {}, "")

        assert (row.sum, row.num, row.date) == (NOT_AVAILABLE,) * 3

    def test_append_failure_propagates(self) -> None:
        appender, _storage, tables = _make_appender()
        tables.append_row.side_effect = StorageError("sheet locked")
        document = Document(id="doc-1", name="inv.pdf", mime_type="application/pdf")

        with pytest.raises(StorageError):
            appender.append_row(TABLE, document, "t", {}, "")


def test_header_matches_row_width() -> None:
    row = LogRow("n", "o", "a", "t", "s", "m", "d")
    assert len(row.as_cells()) == len(LogRow.HEADER) == 7
