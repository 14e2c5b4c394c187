from docwatch.logging.logger import Log
from docwatch.processor.exceptions import OutputLocationError
from docwatch.processor.log_appender import LogAppender
from docwatch.processor.models import ProcessedSet, RunReport
from docwatch.processor.processor import DocumentProcessor
from docwatch.storage.base import BaseStorage
from docwatch.storage.models import Folder
from docwatch.tables.models import TableRef

TEST_RUN_MODE = "test"


class IngestionCoordinator:
    """One pass over the watched folder.

    Finds or creates the output folder and the Extraction Log, diffs the
    folder listing against the processed set and runs every new document
    through the DocumentProcessor inside its own fault boundary. Only
    documents that complete every step join the returned processed set, and
    in test mode none do. Persisting the result is left to the caller.
    """

    def __init__(
        self,
        storage: BaseStorage,
        log_appender: LogAppender,
        processor: DocumentProcessor,
    ) -> None:
        self._storage = storage
        self._log_appender = log_appender
        self._processor = processor

    def run(
        self,
        input_folder_id: str,
        output_folder_name: str,
        processed_set: ProcessedSet,
        run_mode: str | None = None,
    ) -> RunReport:
        test_mode = run_mode == TEST_RUN_MODE
        if test_mode:
            Log.info("Running in test mode")

        output_folder = self.find_or_create_output_folder(input_folder_id, output_folder_name)
        log_table = self._ensure_log(output_folder)

        documents = self._storage.list_files(input_folder_id)
        new_documents = [doc for doc in documents if doc.id not in processed_set]
        Log.info(f"Found {len(processed_set)} known and {len(new_documents)} new")

        report = RunReport(processed_set=processed_set)
        for document in new_documents:
            try:
                context = self._processor.process(document, output_folder, log_table)
            except Exception as exc:
                Log.exception(
                    f"Error processing file: {document.name} ({document.id}): {exc}"
                )
                report.failed.append(document.id)
                continue
            if context.skipped:
                report.skipped.append(document.id)
            else:
                report.succeeded.append(document.id)

        if not test_mode:
            report.processed_set = processed_set.union(report.succeeded)
        Log.info(
            f"Run finished: {len(report.succeeded)} processed, "
            f"{len(report.skipped)} skipped, {len(report.failed)} failed"
        )
        return report

    def find_or_create_output_folder(self, parent_id: str, name: str) -> Folder:
        """Return the subfolder of ``parent_id`` named exactly ``name``, creating it if needed.

        Raises:
            OutputLocationError: if the folder cannot be listed or created.
        """
        try:
            for folder in self._storage.list_folders(parent_id):
                if folder.name == name:
                    Log.info(f"Found existing subfolder: {folder.name} ({folder.id})")
                    return folder
            folder = self._storage.create_folder(parent_id, name)
        except Exception as exc:
            raise OutputLocationError(f"Cannot find or create subfolder {name!r}: {exc}") from exc
        Log.info(f"Created subfolder: {folder.name} ({folder.id})")
        return folder

    def _ensure_log(self, folder: Folder) -> TableRef:
        try:
            return self._log_appender.ensure_log(folder)
        except Exception as exc:
            raise OutputLocationError(
                f"Cannot find or create {LogAppender.LOG_NAME!r} in {folder.name}: {exc}"
            ) from exc
