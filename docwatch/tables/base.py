from abc import ABC, abstractmethod
from collections.abc import Sequence

from docwatch.tables.models import TableRef


class BaseTableStore(ABC):
    """Contract for the spreadsheet-like log store. Failures raise StorageError."""

    @abstractmethod
    def find_table(self, folder_id: str, name: str) -> TableRef | None:
        """Return the table with this exact name in the folder, if any."""

    @abstractmethod
    def create_table(self, folder_id: str, name: str) -> TableRef:
        """Create an empty table inside the folder."""

    @abstractmethod
    def append_row(self, table: TableRef, cells: Sequence[str]) -> None:
        """Append one row after the last existing row."""

    @abstractmethod
    def table_link(self, table: TableRef) -> str:
        """Return a link that opens the table."""
