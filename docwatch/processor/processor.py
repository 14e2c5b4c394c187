from collections.abc import Sequence

from docwatch.config.settings import Settings
from docwatch.logging.logger import Log
from docwatch.processor.artifact_writer import ArtifactWriter
from docwatch.processor.content_extractor import ContentExtractor
from docwatch.processor.field_extractor import FieldExtractor
from docwatch.processor.log_appender import LogAppender
from docwatch.processor.pipeline import PipelineContext, PipelineStep
from docwatch.processor.steps import (
    AppendLogStep,
    ExtractContentStep,
    ExtractFieldsStep,
    WriteArtifactStep,
)
from docwatch.storage.base import BaseStorage
from docwatch.storage.models import Document, Folder
from docwatch.tables.models import TableRef


class DocumentProcessor:
    """Drives one document through the pipeline steps.

    Pipeline: extract content -> extract fields -> write artifact -> append log row.
    A step marking the context as skipped stops the pipeline; any exception
    propagates to the caller's fault boundary.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, document: Document, output_folder: Folder, log_table: TableRef) -> PipelineContext:
        Log.info(f"New file to process: {document.name} ({document.id})")
        context = PipelineContext(
            document=document,
            output_folder=output_folder,
            log_table=log_table,
        )
        for step in self._steps:
            context = step.run(context)
            if context.skipped:
                Log.warning(f"Skipping {document.name}: {context.skip_reason}")
                break
        return context


def build_document_processor(
    settings: Settings,
    storage: BaseStorage,
    log_appender: LogAppender,
) -> DocumentProcessor:
    """Build a DocumentProcessor with the standard step sequence."""
    return DocumentProcessor(
        steps=[
            ExtractContentStep(ContentExtractor(storage, settings.ocr_language)),
            ExtractFieldsStep(FieldExtractor()),
            WriteArtifactStep(ArtifactWriter(storage)),
            AppendLogStep(log_appender),
        ]
    )
