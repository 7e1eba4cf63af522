class RemoteServerError(Exception):
    """Base exception for every failed call to the document server.

    Carries the parsed error body returned by the server (when there was one)
    and the HTTP status code, for diagnostics.
    """

    def __init__(
        self,
        message: str,
        payload: object = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code


class UploadError(RemoteServerError):
    """Raised when a workfile upload is rejected."""


class DownloadError(RemoteServerError):
    """Raised when workfile bytes cannot be retrieved."""


class JobCreationError(RemoteServerError):
    """Raised when the server refuses to create a job."""


class JobStatusError(RemoteServerError):
    """Raised when a job status check fails at the transport or HTTP level."""


class EntityFetchError(RemoteServerError):
    """Raised when the detected PII entities cannot be fetched."""


class UnexpectedResponseError(RemoteServerError):
    """Raised when a successful response lacks a field the protocol promises."""


class UnexpectedJobStateError(RemoteServerError):
    """Raised when a job reaches a terminal state other than 'complete'."""

    def __init__(self, resource_path: str, state: object, body: dict[str, object]) -> None:
        super().__init__(
            f"{resource_path} process state unexpected: {state}",
            payload=body,
        )
        self.resource_path = resource_path
        self.state = state
        self.body = body
