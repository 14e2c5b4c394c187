from pathlib import Path

from docwatch.config.settings import Settings
from docwatch.logging.logger import Log
from docwatch.processor.coordinator import IngestionCoordinator
from docwatch.processor.log_appender import LogAppender
from docwatch.processor.processor import build_document_processor
from docwatch.properties.base import PropertyKeys
from docwatch.properties.json_store import JsonFilePropertyStore
from docwatch.storage.factory import StorageFactory
from docwatch.storage.google_services import GoogleServices, build_google_services
from docwatch.tables.factory import TableStoreFactory
from docwatch.worker.runner import IngestionRunner
from docwatch.worker.worker import Worker


def build_runner(settings: Settings) -> IngestionRunner:
    """Wire property store, storage adapters and the coordinator from settings."""
    properties = JsonFilePropertyStore(
        Path(settings.properties_file),
        defaults={
            PropertyKeys.INPUT_FOLDER_ID: settings.input_folder_id,
            PropertyKeys.OUTPUT_FOLDER_NAME: settings.output_folder_name,
            PropertyKeys.RUN_MODE: settings.run_mode,
        },
    )
    google: GoogleServices | None = None
    if settings.storage_backend.lower() == "drive":
        google = build_google_services(settings)
    storage = StorageFactory.create(settings, google)
    tables = TableStoreFactory.create(settings, google)
    log_appender = LogAppender(storage, tables)
    coordinator = IngestionCoordinator(
        storage=storage,
        log_appender=log_appender,
        processor=build_document_processor(settings, storage, log_appender),
    )
    return IngestionRunner(properties, coordinator)


def main() -> None:
    """Entry point: settings -> logging -> wiring -> one pass or the timer loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    runner = build_runner(settings)
    if settings.run_forever:
        Worker(runner, settings).run()
    else:
        runner.run_once()


if __name__ == "__main__":
    main()
