import time
from collections.abc import Callable
from pathlib import Path

import httpx

from redactor.config.settings import Settings
from redactor.logging.logger import Log
from redactor.markup.synthesizer import MarkupSynthesizer
from redactor.processor.document_files import DocumentFiles
from redactor.processor.pipeline import PipelineContext, PipelineStep
from redactor.processor.steps import (
    BurnMarkupStep,
    CreateMarkupLayerStep,
    CreateSearchContextStep,
    DownloadOutputStep,
    FlattenStep,
    PiiSearchStep,
    ReadInputStep,
    SearchablePdfStep,
    UploadInputStep,
    WriteOutputStep,
)
from redactor.remote.artifact_store import ArtifactStore
from redactor.remote.job_client import JobClient
from redactor.remote.server_client import ServerClient
from redactor.stages.content_converter import ContentConverter
from redactor.stages.markup_burner import MarkupBurner
from redactor.stages.pii_detector import PiiDetector
from redactor.stages.search_context import SearchContexts


class Processor:
    """Runs the redaction pipeline for one document, step by step.

    Pipeline: read -> upload -> OCR -> index -> PII search -> markup ->
    burn -> flatten -> re-OCR -> download -> write.
    The first failing step aborts the run; nothing is rolled back on the server.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, input_path: Path, output_path: Path) -> PipelineContext:
        Log.info(f"Redacting {input_path} -> {output_path}")
        context = PipelineContext(input_path=input_path, output_path=output_path)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(f"{type(step).__name__} failed: {exc}")
                raise
        return context


def build_processor(
    settings: Settings,
    http_client: httpx.Client,
    sleep: Callable[[float], None] = time.sleep,
) -> Processor:
    """Build a Processor whose stages share one server connection."""
    server = ServerClient(http_client)
    jobs = JobClient(
        server,
        poll_interval_seconds=settings.job_poll_interval_seconds,
        sleep=sleep,
    )
    store = ArtifactStore(server, settings.workfile_path)
    converter = ContentConverter(jobs, ocr_language=settings.ocr_language)
    files = DocumentFiles()
    steps: list[PipelineStep] = [
        ReadInputStep(files),
        UploadInputStep(store),
        SearchablePdfStep(converter, source="input_file_id", target="searchable_file_id"),
        CreateSearchContextStep(SearchContexts(jobs)),
        PiiSearchStep(PiiDetector(jobs, server)),
        CreateMarkupLayerStep(MarkupSynthesizer(), store),
        BurnMarkupStep(MarkupBurner(jobs, settings.markup_burner_path)),
        FlattenStep(converter),
        SearchablePdfStep(converter, source="flattened_file_id", target="final_file_id"),
        DownloadOutputStep(store),
        WriteOutputStep(files),
    ]
    return Processor(steps)
