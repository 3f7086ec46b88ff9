"""
Unit tests for the remote markdown content service.
"""
import pytest
import requests

from content import service
from content.service import (
    ERROR_PLACEHOLDER,
    ContentFetchError,
    content_url,
    fetch_learn_item,
    fetch_markdown,
    get_markdown_content,
)


class FakeResponse:
    def __init__(self, status_code=200, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    """Returns queued responses (or raises queued exceptions) in order."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(service.time, "sleep", lambda seconds: None)


class TestContentUrl:
    def test_joins_base_and_path(self):
        assert content_url("docs/arrays.md", "https://example.com/repo/") == "https://example.com/repo/docs/arrays.md"
        assert content_url("/README.md", "https://example.com/repo") == "https://example.com/repo/README.md"


class TestGetMarkdownContent:
    """Test the raising fetch function."""

    def test_success(self):
        session = FakeSession(FakeResponse(text="# Arrays"))
        assert get_markdown_content("docs/arrays.md", base_url="https://x", session=session) == "# Arrays"
        assert session.urls == ["https://x/docs/arrays.md"]

    def test_http_error_raises(self):
        session = FakeSession(FakeResponse(status_code=404, reason="Not Found"))
        with pytest.raises(ContentFetchError) as exc_info:
            get_markdown_content("docs/missing.md", base_url="https://x", session=session)
        assert "404 Not Found" in str(exc_info.value)
        assert len(session.urls) == 1

    def test_retries_connection_errors(self):
        session = FakeSession(requests.ConnectionError("reset"), FakeResponse(text="ok"))
        assert get_markdown_content("a.md", base_url="https://x", retries=2, session=session) == "ok"
        assert len(session.urls) == 2

    def test_gives_up_after_retries(self):
        session = FakeSession(requests.Timeout("slow"), requests.Timeout("slow"))
        with pytest.raises(ContentFetchError):
            get_markdown_content("a.md", base_url="https://x", retries=2, session=session)
        assert len(session.urls) == 2

    def test_uses_requests_without_session(self, monkeypatch):
        calls = []

        def fake_get(url, timeout=None):
            calls.append((url, timeout))
            return FakeResponse(text="body")

        monkeypatch.setattr(service.requests, "get", fake_get)
        assert get_markdown_content("README.md", base_url="https://x", timeout=3) == "body"
        assert calls == [("https://x/README.md", 3)]


class TestFetchMarkdown:
    """Test the non-raising wrappers used by pages."""

    def test_returns_content(self):
        session = FakeSession(FakeResponse(text="# Changelog"))
        assert fetch_markdown("CHANGELOG.md", base_url="https://x", session=session) == "# Changelog"

    def test_returns_placeholder_on_error(self, caplog):
        session = FakeSession(FakeResponse(status_code=500, reason="Server Error"))
        text = fetch_markdown("CHANGELOG.md", base_url="https://x", session=session)

        assert text.startswith(ERROR_PLACEHOLDER)
        assert "\nDetails: Failed to fetch Markdown: 500 Server Error" in text
        assert "Failed to fetch markdown" in caplog.text

    def test_learn_item_path(self):
        session = FakeSession(FakeResponse(text="# Arrays"))
        assert fetch_learn_item("arrays", base_url="https://x", session=session) == "# Arrays"
        assert session.urls == ["https://x/docs/arrays.md"]

    def test_learn_item_accepts_extension(self):
        session = FakeSession(FakeResponse(text="# Arrays"))
        fetch_learn_item("arrays.md", base_url="https://x", session=session)
        assert session.urls == ["https://x/docs/arrays.md"]
