from redactor.remote.job_client import JobClient
from redactor.remote.server_client import require_field


class MarkupBurner:
    """Composites a markup layer permanently into a document's page content."""

    def __init__(self, jobs: JobClient, resource_path: str = "PCCIS/V1/MarkupBurner") -> None:
        self._jobs = jobs
        self._resource_path = resource_path.strip("/")

    def burn(self, document_file_id: str, markup_file_id: str) -> str:
        """Burn the markup into the document and return the burned document's file id.

        Unlike the converters, the result id is reported in the output's
        ``documentFileId`` field rather than a ``results`` list.
        """
        payload = {
            "input": {
                "documentFileId": document_file_id,
                "markupFileId": markup_file_id,
            }
        }
        job = self._jobs.run(self._resource_path, payload)
        output = job.output if isinstance(job.output, dict) else {}
        return str(require_field(output, "documentFileId", f"{self._resource_path} output"))
