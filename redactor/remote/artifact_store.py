from redactor.logging.logger import Log
from redactor.remote.exceptions import DownloadError, UploadError
from redactor.remote.server_client import ServerClient, require_field


class ArtifactStore:
    """Moves bytes in and out of server-held workfiles."""

    def __init__(self, server: ServerClient, workfile_path: str) -> None:
        self._server = server
        self._workfile_path = workfile_path.strip("/")

    def upload(self, content: bytes, content_type: str, extension: str) -> str:
        """Store ``content`` as a new workfile and return its file id.

        The extension tells the server how to interpret the bytes, independently
        of the declared content type.

        Raises:
            UploadError: if the server rejects the upload.
        """
        response = self._server.request(
            "POST",
            self._workfile_path,
            params={"FileExtension": extension},
            content=content,
            headers={"content-type": content_type},
            error_cls=UploadError,
            failure_message="Workfile creation failed",
        )
        body = self._server.json_body(
            response, error_cls=UploadError, failure_message="Workfile creation failed"
        )
        file_id = str(require_field(body, "fileId", "Workfile creation"))
        Log.debug(f"Uploaded {len(content)} bytes as workfile {file_id}")
        return file_id

    def download(self, file_id: str) -> bytes:
        """Fetch the raw bytes of a workfile.

        Raises:
            DownloadError: if the bytes cannot be retrieved.
        """
        response = self._server.request(
            "GET",
            f"{self._workfile_path}/{file_id}",
            error_cls=DownloadError,
            failure_message="Retrieving workfile bytes failed",
        )
        return response.content
