from docwatch.logging.logger import Log
from docwatch.processor.coordinator import TEST_RUN_MODE, IngestionCoordinator
from docwatch.processor.exceptions import ConfigurationError, IngestionError
from docwatch.processor.models import ProcessedSet, RunReport
from docwatch.properties.base import BasePropertyStore, PropertyKeys
from docwatch.properties.exceptions import PropertyStoreError


class IngestionRunner:
    """Run one ingestion pass: read properties, run the coordinator, persist.

    Never raises. Configuration problems and fatal run errors are logged and
    leave the stored processed set untouched.
    """

    def __init__(self, properties: BasePropertyStore, coordinator: IngestionCoordinator) -> None:
        self._properties = properties
        self._coordinator = coordinator

    def run_once(self) -> RunReport | None:
        try:
            input_folder_id = self._require(PropertyKeys.INPUT_FOLDER_ID)
            output_folder_name = self._require(PropertyKeys.OUTPUT_FOLDER_NAME)
            run_mode = self._properties.get(PropertyKeys.RUN_MODE)
        except (ConfigurationError, PropertyStoreError) as exc:
            Log.error(f"{exc}. Exiting...")
            return None

        try:
            processed_set = ProcessedSet.from_json(
                self._properties.get(PropertyKeys.KNOWN_FILE_IDS)
            )
            report = self._coordinator.run(
                input_folder_id,
                output_folder_name,
                processed_set,
                run_mode,
            )
        except IngestionError as exc:
            Log.error(f"Run aborted: {exc}")
            return None
        except Exception as exc:
            Log.exception(f"Run failed: {exc}")
            return None

        if run_mode != TEST_RUN_MODE:
            self._persist(report.processed_set)
        return report

    def _require(self, key: str) -> str:
        value = self._properties.get(key)
        if not value:
            raise ConfigurationError(f"No '{key}' property found or it is empty")
        return value

    def _persist(self, processed_set: ProcessedSet) -> None:
        try:
            self._properties.set(PropertyKeys.KNOWN_FILE_IDS, processed_set.to_json())
        except Exception as exc:
            Log.exception(f"Could not persist {PropertyKeys.KNOWN_FILE_IDS}: {exc}")
            return
        Log.info(f"Persisted {len(processed_set)} known file ids")
