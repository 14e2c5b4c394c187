from pathlib import Path

from docwatch.config.settings import Settings
from docwatch.pdf.factory import PdfExtractorFactory
from docwatch.storage.base import BaseStorage
from docwatch.storage.drive_adapter import DriveStorage
from docwatch.storage.google_services import GoogleServices
from docwatch.storage.local_adapter import LocalStorage


class StorageFactory:
    """Creates the file storage backend named by settings.storage_backend."""

    BACKENDS = ("local", "drive")

    @classmethod
    def create(cls, settings: Settings, google: GoogleServices | None = None) -> BaseStorage:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalStorage(
                root=Path(settings.local_storage_root),
                pdf_extractor=PdfExtractorFactory.create(settings),
            )
        if backend == "drive":
            if google is None:
                raise ValueError("Google services are required for storage_backend=drive")
            return DriveStorage(google.drive, retry_attempts=settings.drive_retry_attempts)
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
