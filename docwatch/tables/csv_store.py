import csv
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from docwatch.storage.exceptions import StorageError, StorageNotFoundError
from docwatch.tables.base import BaseTableStore
from docwatch.tables.models import TableRef


class CsvTableStore(BaseTableStore):
    """Stores each table as ``<name>.csv`` under a local root.

    Folder and table ids share LocalStorage's root-relative POSIX paths.
    """

    SUFFIX = ".csv"

    def __init__(self, root: Path) -> None:
        self._root = root

    def find_table(self, folder_id: str, name: str) -> TableRef | None:
        path = self._root / folder_id / f"{name}{self.SUFFIX}"
        if not path.is_file():
            return None
        return TableRef(id=self._to_id(path), name=name)

    def create_table(self, folder_id: str, name: str) -> TableRef:
        folder = self._root / folder_id
        if not folder.is_dir():
            raise StorageNotFoundError(f"Folder not found: {folder_id}")
        path = folder / f"{name}{self.SUFFIX}"
        try:
            path.touch(exist_ok=False)
        except OSError as exc:
            raise StorageError(f"Cannot create table {path}: {exc}") from exc
        return TableRef(id=self._to_id(path), name=name)

    def append_row(self, table: TableRef, cells: Sequence[str]) -> None:
        path = self._root / table.id
        if not path.is_file():
            raise StorageNotFoundError(f"Table not found: {table.id}")
        try:
            with path.open("a", newline="", encoding="utf-8") as fh:
                csv.writer(fh).writerow(cells)
        except OSError as exc:
            raise StorageError(f"Cannot append to {path}: {exc}") from exc

    def table_link(self, table: TableRef) -> str:
        return (self._root / table.id).resolve().as_uri()

    def _to_id(self, path: Path) -> str:
        return str(PurePosixPath(path.relative_to(self._root)))
