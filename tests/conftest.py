"""
pytest configuration for httpdl tests.

Adds the repository root to the Python path and provides a fake
streamed response.
"""

import sys
from pathlib import Path

import pytest
from requests.structures import CaseInsensitiveDict

# Add repository root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))


class FakeResponse:
    """Stands in for a streamed requests.Response."""

    def __init__(self, body=b"", chunks=None, status_code=200, headers=None):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self._chunks = chunks if chunks is not None else [body]
        self.closed = False

    def iter_content(self, chunk_size=1):
        for chunk in self._chunks:
            if isinstance(chunk, BaseException):
                raise chunk
            yield chunk

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def fake_response():
    """Factory for FakeResponse objects."""
    return FakeResponse


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
