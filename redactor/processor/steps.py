from redactor.logging.logger import Log
from redactor.markup.synthesizer import MarkupSynthesizer
from redactor.processor.document_files import DocumentFiles
from redactor.processor.exceptions import PipelineStateError
from redactor.processor.pipeline import PipelineContext, PipelineStep
from redactor.remote.artifact_store import ArtifactStore
from redactor.stages.content_converter import ContentConverter
from redactor.stages.markup_burner import MarkupBurner
from redactor.stages.pii_detector import PiiDetector
from redactor.stages.search_context import SearchContexts


def _require(context: PipelineContext, field_name: str, step: str) -> str:
    value = getattr(context, field_name)
    if not value:
        raise PipelineStateError(f"PipelineContext.{field_name} must be set before {step}")
    return value


class ReadInputStep(PipelineStep):
    def __init__(self, files: DocumentFiles) -> None:
        self._files = files

    def run(self, context: PipelineContext) -> PipelineContext:
        context.input_bytes = self._files.load(context.input_path)
        self._files.check_output(context.output_path)
        Log.info(f"Read {len(context.input_bytes)} bytes from {context.input_path}")
        return context


class UploadInputStep(PipelineStep):
    def __init__(self, store: ArtifactStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        context.input_file_id = self._store.upload(
            context.input_bytes, "application/pdf", "pdf"
        )
        Log.info(f"input_file_id={context.input_file_id}")
        return context


class SearchablePdfStep(PipelineStep):
    """OCR step; placed twice in the pipeline with different source and target ids."""

    def __init__(self, converter: ContentConverter, source: str, target: str) -> None:
        self._converter = converter
        self._source = source
        self._target = target

    def run(self, context: PipelineContext) -> PipelineContext:
        source_id = _require(context, self._source, "OCR")
        file_id = self._converter.to_searchable_pdf(source_id)
        setattr(context, self._target, file_id)
        Log.info(f"{self._target}={file_id}")
        return context


class CreateSearchContextStep(PipelineStep):
    def __init__(self, search_contexts: SearchContexts) -> None:
        self._search_contexts = search_contexts

    def run(self, context: PipelineContext) -> PipelineContext:
        source_id = _require(context, "searchable_file_id", "search context creation")
        context.search_context_id = self._search_contexts.create(source_id)
        Log.info(f"search_context_id={context.search_context_id}")
        return context


class PiiSearchStep(PipelineStep):
    def __init__(self, detector: PiiDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        context_id = _require(context, "search_context_id", "PII search")
        context.pii_entities = self._detector.search(context_id)
        Log.info(f"pii_entity_count={len(context.pii_entities)}")
        return context


class CreateMarkupLayerStep(PipelineStep):
    def __init__(self, synthesizer: MarkupSynthesizer, store: ArtifactStore) -> None:
        self._synthesizer = synthesizer
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        layer = self._synthesizer.synthesize(context.pii_entities)
        # Generic content type; the json extension makes the server parse it as markup.
        context.markup_file_id = self._store.upload(
            self._synthesizer.serialize(layer), "application/octet-stream", "json"
        )
        Log.info(f"markup_file_id={context.markup_file_id} ({len(layer.marks)} marks)")
        return context


class BurnMarkupStep(PipelineStep):
    def __init__(self, burner: MarkupBurner) -> None:
        self._burner = burner

    def run(self, context: PipelineContext) -> PipelineContext:
        document_id = _require(context, "searchable_file_id", "burning markup")
        markup_id = _require(context, "markup_file_id", "burning markup")
        context.burned_file_id = self._burner.burn(document_id, markup_id)
        Log.info(f"burned_file_id={context.burned_file_id}")
        return context


class FlattenStep(PipelineStep):
    def __init__(self, converter: ContentConverter) -> None:
        self._converter = converter

    def run(self, context: PipelineContext) -> PipelineContext:
        source_id = _require(context, "burned_file_id", "flattening")
        context.flattened_file_id = self._converter.to_flattened_image(source_id)
        Log.info(f"flattened_file_id={context.flattened_file_id}")
        return context


class DownloadOutputStep(PipelineStep):
    def __init__(self, store: ArtifactStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        file_id = _require(context, "final_file_id", "download")
        context.output_bytes = self._store.download(file_id)
        Log.info(f"Downloaded {len(context.output_bytes)} bytes of workfile {file_id}")
        return context


class WriteOutputStep(PipelineStep):
    def __init__(self, files: DocumentFiles) -> None:
        self._files = files

    def run(self, context: PipelineContext) -> PipelineContext:
        self._files.save(context.output_path, context.output_bytes)
        Log.info(f"output_file={context.output_path}")
        return context
