import pytest
import requests

from access_log_analyzer import FetchError, download_log, read_log_file
from access_log_analyzer import fetch


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


def test_download_returns_body(monkeypatch):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        return FakeResponse(text="line one\nline two\n")

    monkeypatch.setattr(fetch.requests, "get", fake_get)

    assert download_log("http://logs.test/access.log", timeout=5) == "line one\nline two\n"
    assert calls[0][0] == "http://logs.test/access.log"
    assert calls[0][1]["timeout"] == 5


def test_download_non_200_raises(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda url, **kw: FakeResponse(status_code=404))

    with pytest.raises(FetchError) as excinfo:
        download_log("http://logs.test/missing.log")

    assert excinfo.value.status_code == 404
    assert "Status code: 404" in str(excinfo.value)


def test_download_transport_failure_raises(monkeypatch):
    def fake_get(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(fetch.requests, "get", fake_get)

    with pytest.raises(FetchError) as excinfo:
        download_log("http://logs.test/access.log")

    assert excinfo.value.status_code is None
    assert "connection refused" in excinfo.value.reason


def test_read_log_file(tmp_path):
    log = tmp_path / "access.log"
    log.write_text("a\nb\n", encoding="utf-8")
    assert read_log_file(str(log)) == "a\nb\n"


def test_read_missing_log_file(tmp_path):
    with pytest.raises(FetchError):
        read_log_file(str(tmp_path / "nope.log"))
