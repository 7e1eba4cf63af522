import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from redactor.logging.logger import Log
from redactor.remote.exceptions import (
    JobCreationError,
    JobStatusError,
    UnexpectedJobStateError,
)
from redactor.remote.server_client import ServerClient, require_field

STATE_PROCESSING = "processing"
STATE_COMPLETE = "complete"


@dataclass(frozen=True)
class CompletedJob:
    """A job that reached the 'complete' state."""

    job_id: str
    output: Any


class JobClient:
    """Create-then-poll protocol shared by every long-running server operation.

    A job is created with a POST to ``resource_path`` and its status is read
    from ``resource_path/<job id>`` until the state leaves 'processing'.
    Polling has no retry cap: a run waits for as long as the server keeps
    reporting 'processing'.
    """

    def __init__(
        self,
        server: ServerClient,
        poll_interval_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._server = server
        self._poll_interval_seconds = poll_interval_seconds
        self._sleep = sleep

    def start_job(
        self,
        resource_path: str,
        payload: dict[str, object],
        id_field: str = "processId",
    ) -> str:
        """Create a job and return its identifier read from ``id_field``.

        Raises:
            JobCreationError: if the creation call is not successful.
            UnexpectedResponseError: if the response lacks ``id_field``.
        """
        body = self._server.post_json(
            resource_path,
            payload,
            error_cls=JobCreationError,
            failure_message=f"{resource_path} process creation failed",
        )
        job_id = str(require_field(body, id_field, f"{resource_path} process creation"))
        Log.debug(f"Created {resource_path} job {job_id}")
        return job_id

    def await_completion(self, resource_path: str, job_id: str) -> Any:
        """Poll the job until it completes and return its ``output`` field.

        Raises:
            JobStatusError: if a status check fails.
            UnexpectedJobStateError: if the job ends in any state but 'complete'.
        """
        status_path = f"{resource_path}/{job_id}"
        while True:
            body = self._server.get_json(
                status_path,
                error_cls=JobStatusError,
                failure_message=f"Checking status of {resource_path} failed",
            )
            state = body.get("state")
            if state == STATE_PROCESSING:
                progress = body.get("percentComplete")
                if progress is not None:
                    Log.debug(f"{status_path} processing ({progress}%)")
                else:
                    Log.debug(f"{status_path} processing")
                self._sleep(self._poll_interval_seconds)
                continue
            if state == STATE_COMPLETE:
                return body.get("output")
            Log.payload(f"{resource_path} process state unexpected: {state}", body)
            raise UnexpectedJobStateError(resource_path, state, body)

    def run(
        self,
        resource_path: str,
        payload: dict[str, object],
        id_field: str = "processId",
    ) -> CompletedJob:
        """Start a job and wait for it; callers pick the fields they need from the output."""
        job_id = self.start_job(resource_path, payload, id_field=id_field)
        output = self.await_completion(resource_path, job_id)
        return CompletedJob(job_id=job_id, output=output)
