from redactor.logging.logger import Log
from redactor.markup.models import PiiEntity
from redactor.remote.exceptions import EntityFetchError, UnexpectedResponseError
from redactor.remote.job_client import JobClient
from redactor.remote.server_client import ServerClient


class PiiDetector:
    """Finds PII within an existing search context.

    Detection is a job like any other, but its results are not in the job
    output: they are read afterwards from the job's ``entities`` resource.
    """

    RESOURCE_PATH = "v2/piiDetectors"

    def __init__(self, jobs: JobClient, server: ServerClient) -> None:
        self._jobs = jobs
        self._server = server

    def search(self, context_id: str) -> list[PiiEntity]:
        """Run PII detection and return the detected entities.

        Raises:
            JobCreationError, JobStatusError, UnexpectedJobStateError: from the job.
            EntityFetchError: if the entities cannot be fetched.
        """
        job = self._jobs.run(self.RESOURCE_PATH, {"input": {"contextId": context_id}})
        body = self._server.get_json(
            f"{self.RESOURCE_PATH}/{job.job_id}/entities",
            error_cls=EntityFetchError,
            failure_message="PII detection process failed",
        )
        raw_entities = body.get("entities")
        if not isinstance(raw_entities, list):
            raise UnexpectedResponseError(
                "PII detection returned no entity list", payload=body
            )
        try:
            entities = [PiiEntity.from_dict(item) for item in raw_entities]
        except (KeyError, TypeError, ValueError) as exc:
            raise UnexpectedResponseError(
                f"PII detection returned a malformed entity: {exc}", payload=body
            ) from exc
        Log.debug(f"PII detector {job.job_id} returned {len(entities)} entities")
        return entities
