from redactor.remote.artifact_store import ArtifactStore
from redactor.remote.job_client import CompletedJob, JobClient
from redactor.remote.server_client import ServerClient, build_http_client

__all__ = ["ArtifactStore", "CompletedJob", "JobClient", "ServerClient", "build_http_client"]
