from typing import Any

import httpx

from redactor.config.settings import Settings
from redactor.logging.logger import Log
from redactor.processor.exceptions import ConfigurationError
from redactor.remote.exceptions import RemoteServerError, UnexpectedResponseError

JSON_CONTENT_TYPE = "application/json;charset=utf-8"


def build_http_client(settings: Settings) -> httpx.Client:
    """Build the HTTP client shared by every remote component of one run."""
    base_url = settings.prizmdoc_server_url.strip()
    if not base_url:
        raise ConfigurationError("prizmdoc_server_url is required")
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=settings.prizmdoc_timeout_seconds,
    )


def error_payload(response: httpx.Response) -> object:
    """Return the parsed error body of a failed response, or its raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class ServerClient:
    """Issues requests against the document server and maps failures to errors.

    Paths are relative to the client's base URL. Every transport error and
    every non-2xx response is raised as the ``error_cls`` given by the caller,
    so each remote operation reports failures in its own terms.
    """

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def request(
        self,
        method: str,
        path: str,
        *,
        error_cls: type[RemoteServerError],
        failure_message: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            Log.error(f"{failure_message}: {exc}")
            raise error_cls(f"{failure_message}: {exc}") from exc

        if not response.is_success:
            payload = error_payload(response)
            Log.payload(f"{failure_message} (HTTP {response.status_code})", payload)
            raise error_cls(
                failure_message,
                payload=payload,
                status_code=response.status_code,
            )
        return response

    def post_json(
        self,
        path: str,
        body: dict[str, object],
        *,
        error_cls: type[RemoteServerError],
        failure_message: str,
    ) -> dict[str, Any]:
        response = self.request(
            "POST",
            path,
            json=body,
            headers={"content-type": JSON_CONTENT_TYPE},
            error_cls=error_cls,
            failure_message=failure_message,
        )
        return self.json_body(response, error_cls=error_cls, failure_message=failure_message)

    def get_json(
        self,
        path: str,
        *,
        error_cls: type[RemoteServerError],
        failure_message: str,
    ) -> dict[str, Any]:
        response = self.request(
            "GET", path, error_cls=error_cls, failure_message=failure_message
        )
        return self.json_body(response, error_cls=error_cls, failure_message=failure_message)

    @staticmethod
    def json_body(
        response: httpx.Response,
        *,
        error_cls: type[RemoteServerError],
        failure_message: str,
    ) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as exc:
            raise error_cls(
                f"{failure_message}: response is not JSON",
                payload=response.text,
                status_code=response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise UnexpectedResponseError(
                f"{failure_message}: expected a JSON object",
                payload=body,
                status_code=response.status_code,
            )
        return body


def require_field(body: dict[str, Any], field: str, context: str) -> Any:
    """Return ``body[field]``, raising UnexpectedResponseError when it is absent."""
    value = body.get(field)
    if value is None or value == "":
        Log.payload(f"{context}: response has no '{field}'", body)
        raise UnexpectedResponseError(
            f"{context}: response has no '{field}'", payload=body
        )
    return value
