from typing import Any

from redactor.remote.exceptions import UnexpectedResponseError
from redactor.remote.job_client import JobClient
from redactor.remote.server_client import require_field


class ContentConverter:
    """Runs content conversion jobs (OCR to searchable PDF, rasterize to TIFF)."""

    RESOURCE_PATH = "v2/contentConverters"

    def __init__(self, jobs: JobClient, ocr_language: str = "english") -> None:
        self._jobs = jobs
        self._ocr_language = ocr_language

    def to_searchable_pdf(self, file_id: str) -> str:
        """OCR the workfile into a PDF with a text layer and return the new file id."""
        return self._convert(
            file_id,
            {"format": "pdf", "pdfOptions": {"ocr": {"language": self._ocr_language}}},
        )

    def to_flattened_image(self, file_id: str) -> str:
        """Rasterize the workfile to TIFF, leaving no extractable text behind."""
        return self._convert(file_id, {"format": "tiff"})

    def _convert(self, file_id: str, dest: dict[str, object]) -> str:
        payload = {"input": {"sources": [{"fileId": file_id}], "dest": dest}}
        job = self._jobs.run(self.RESOURCE_PATH, payload)
        results = _results(job.output)
        return str(require_field(results[0], "fileId", f"{self.RESOURCE_PATH} result"))


def _results(output: Any) -> list[dict[str, Any]]:
    results = output.get("results") if isinstance(output, dict) else None
    if not results:
        raise UnexpectedResponseError(
            f"{ContentConverter.RESOURCE_PATH} completed without results", payload=output
        )
    return results
