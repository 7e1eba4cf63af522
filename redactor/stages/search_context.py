import uuid

from redactor.remote.job_client import JobClient


class SearchContexts:
    """Indexes a workfile's text so it can be searched.

    The context id returned on creation is both the job id to poll and the
    handle later PII searches are scoped to.
    """

    RESOURCE_PATH = "v2/searchContexts"

    def __init__(self, jobs: JobClient) -> None:
        self._jobs = jobs

    def create(self, file_id: str, document_identifier: str | None = None) -> str:
        payload = {
            "input": {
                "documentIdentifier": document_identifier or str(uuid.uuid4()),
                "fileId": file_id,
                "source": "workFile",
            }
        }
        job = self._jobs.run(self.RESOURCE_PATH, payload, id_field="contextId")
        return job.job_id
