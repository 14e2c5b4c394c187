from docwatch.logging.logger import Log
from docwatch.processor.artifact_writer import ArtifactWriter
from docwatch.processor.content_extractor import ContentExtractor
from docwatch.processor.field_extractor import FieldExtractor
from docwatch.processor.log_appender import LogAppender
from docwatch.processor.pipeline import PipelineContext, PipelineStep


class ExtractContentStep(PipelineStep):
    def __init__(self, content_extractor: ContentExtractor) -> None:
        self._content_extractor = content_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.text = self._content_extractor.extract(context.document)
        if not context.text:
            context.skipped = True
            context.skip_reason = "no content extracted"
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, field_extractor: FieldExtractor) -> None:
        self._field_extractor = field_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._field_extractor.extract(context.text)
        Log.info(f"Extracted fields from {context.document.name}: {context.extracted}")
        return context


class WriteArtifactStep(PipelineStep):
    def __init__(self, artifact_writer: ArtifactWriter) -> None:
        self._artifact_writer = artifact_writer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.artifact_link = self._artifact_writer.write(
            context.document.name,
            context.text,
            context.output_folder,
        )
        return context


class AppendLogStep(PipelineStep):
    def __init__(self, log_appender: LogAppender) -> None:
        self._log_appender = log_appender

    def run(self, context: PipelineContext) -> PipelineContext:
        self._log_appender.append_row(
            context.log_table,
            context.document,
            context.text,
            context.extracted,
            context.artifact_link,
        )
        return context
