"""
Pytest configuration and shared fixtures for Sky Categories client tests.
"""

import io
import json
import tempfile
from pathlib import Path
from typing import Any, Generator, Optional

import pytest
import requests

from skycategories.sdk.client import CategoriesClient


BASE_URL = "http://categories.test"
API_KEY = "test-api-key"
DEFAULT_TOKEN = "Bearer default-token"

CATEGORY_ID = "11111111-1111-1111-1111-111111111111"
PROJECT_ID = "22222222-2222-2222-2222-222222222222"
SKILL_ID = "33333333-3333-3333-3333-333333333333"


def make_response(
    status_code: int,
    body: Any = None,
    text: Optional[str] = None,
) -> requests.Response:
    """
    Build a requests.Response as the transport would return it.

    Args:
        status_code: HTTP status code.
        body: JSON-serializable body. Ignored when ``text`` is given.
        text: Raw body text.

    Returns:
        Response with its content already loaded.
    """
    if text is not None:
        content = text.encode("utf-8")
    elif body is not None:
        content = json.dumps(body).encode("utf-8")
    else:
        content = b""

    response = requests.Response()
    response.status_code = status_code
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    response.raw = io.BytesIO(content)
    response._content = content
    response._content_consumed = True
    return response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def category_payload() -> dict:
    """Category body as the service returns it."""
    return {
        "id": CATEGORY_ID,
        "name": "Sales",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
        "version": 1,
    }


@pytest.fixture
def client() -> Generator[CategoriesClient, None, None]:
    """
    Categories client on a real requests session.

    Tests patch ``client.session.send`` to stand in for the network.
    """
    session = requests.Session()
    categories_client = CategoriesClient(
        base_url=BASE_URL,
        token=DEFAULT_TOKEN,
        api_key=API_KEY,
        session=session,
    )
    yield categories_client
    session.close()
