from collections.abc import Generator

import httpx
import pytest

from redactor.config.settings import Settings

from fake_server import FakeDocumentServer


def _entity(page_index: int, rect_count: int) -> dict[str, object]:
    return {
        "text": "redacted",
        "pageIndex": page_index,
        "lineGroups": [
            {
                "pageData": {"width": 612, "height": 792},
                "lines": [
                    {"x": 72 + i * 10, "y": 700, "width": 80, "height": 12}
                    for i in range(rect_count)
                ],
            }
        ],
    }


@pytest.fixture
def fake_server() -> FakeDocumentServer:
    return FakeDocumentServer(entities=[_entity(0, 2), _entity(3, 1)])


@pytest.fixture
def integration_settings() -> Settings:
    return Settings(prizmdoc_server_url="http://prizm.test", job_poll_interval_seconds=0)


@pytest.fixture
def http_client(fake_server: FakeDocumentServer) -> Generator[httpx.Client, None, None]:
    with httpx.Client(
        base_url="http://prizm.test", transport=httpx.MockTransport(fake_server)
    ) as client:
        yield client
