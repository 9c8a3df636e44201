from pathlib import Path

import pytest
import requests
from streamlit.testing.v1 import AppTest

from tests.conftest import FakeHttpSession

PAGE_PATH = str(Path(__file__).resolve().parents[1] / "Campaign_Architecture.py")


@pytest.fixture
def backend(monkeypatch):
    def install(*responses):
        fake = FakeHttpSession(*responses)
        monkeypatch.setattr(requests.Session, "get", lambda self, url, **kwargs: fake.get(url, **kwargs))
        return fake
    return install


def _markdown_text(app: AppTest) -> str:
    return "\n".join(element.value for element in app.markdown)


def _close(app: AppTest) -> None:
    if "dashboard_session" in app.session_state:
        app.session_state["dashboard_session"].close()


def test_http_500_renders_error_state(backend, server_error) -> None:
    http = backend(server_error)
    app = AppTest.from_file(PAGE_PATH, default_timeout=30).run()
    try:
        assert not app.exception
        text = _markdown_text(app)
        assert "Error loading data" in text
        assert "Failed to fetch data: 500 Internal Server Error" in text
        assert app.button(key="retry_fetch").label == "Retry"
        assert len(http.calls) == 1
    finally:
        _close(app)


def test_retry_reissues_the_fetch(backend, server_error, ok_response) -> None:
    http = backend(server_error, ok_response)
    app = AppTest.from_file(PAGE_PATH, default_timeout=30).run()
    try:
        app.button(key="retry_fetch").click().run()

        assert not app.exception
        assert len(http.calls) == 2
        assert "Error loading data" not in _markdown_text(app)
        assert "Campaign Architecture" in _markdown_text(app)
    finally:
        _close(app)


def test_successful_fetch_skips_error_state(backend, ok_response) -> None:
    http = backend(ok_response)
    app = AppTest.from_file(PAGE_PATH, default_timeout=30).run()
    try:
        assert not app.exception
        assert "Error loading data" not in _markdown_text(app)
        assert len(app.button) == 0
        assert len(http.calls) == 1
    finally:
        _close(app)
