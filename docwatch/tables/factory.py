from pathlib import Path

from docwatch.config.settings import Settings
from docwatch.storage.google_services import GoogleServices
from docwatch.tables.base import BaseTableStore
from docwatch.tables.csv_store import CsvTableStore
from docwatch.tables.sheets_store import SheetsTableStore


class TableStoreFactory:
    """Creates the table store that pairs with settings.storage_backend."""

    @classmethod
    def create(cls, settings: Settings, google: GoogleServices | None = None) -> BaseTableStore:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return CsvTableStore(root=Path(settings.local_storage_root))
        if backend == "drive":
            if google is None:
                raise ValueError("Google services are required for storage_backend=drive")
            return SheetsTableStore(
                google.drive,
                google.sheets,
                retry_attempts=settings.drive_retry_attempts,
            )
        raise ValueError(f"Unknown storage backend '{backend}'. Choose from: ['local', 'drive']")
