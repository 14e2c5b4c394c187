from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docwatch.processor.models import ExtractionResult
from docwatch.storage.models import Document, Folder
from docwatch.tables.models import TableRef


@dataclass(slots=True)
class PipelineContext:
    document: Document
    output_folder: Folder
    log_table: TableRef
    text: str = ""
    extracted: ExtractionResult = field(default_factory=dict)
    artifact_link: str = ""
    skipped: bool = False
    skip_reason: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
