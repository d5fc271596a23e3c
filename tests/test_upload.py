"""Tests for uploads to a paste/upload endpoint."""

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from kubelogns.exceptions import UploadError
from kubelogns.models import WarningState
from kubelogns.upload import UploadSink


def _session(text="https://0x0.st/abcd.txt\n", status_code=200):
    session = MagicMock(spec=requests.Session)
    resp = MagicMock()
    resp.text = text
    resp.status_code = status_code
    session.post.return_value = resp
    return session


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "default_logs.txt"
    path.write_bytes(b"line one\nline two\n")
    return path


def test_upload_posts_multipart_and_returns_trimmed_url(log_file):
    sent = {}
    session = _session()

    def post(url, files, data, headers):
        name, fh = files["file"]
        sent.update(url=url, name=name, content=fh.read(), data=data, headers=headers)
        return session.post.return_value

    session.post.side_effect = post
    sink = UploadSink("https://paste.test", WarningState(), session=session)

    assert sink.upload(str(log_file), 1) == "https://0x0.st/abcd.txt"
    assert sent["url"] == "https://paste.test"
    assert sent["name"] == "default_logs.txt"
    assert sent["content"] == b"line one\nline two\n"
    assert sent["data"] == {"expires": "1"}
    assert sent["headers"]["User-Agent"].startswith("kubelogns/")


def test_default_endpoint_warns_once_per_run(log_file, caplog):
    warnings = WarningState()
    session = _session()
    first = UploadSink(None, warnings, session=session)
    second = UploadSink(None, warnings, session=session)

    with caplog.at_level(logging.WARNING, logger="kubelogns"):
        first.upload(str(log_file), 1)
        first.upload(str(log_file), 1)
        second.upload(str(log_file), 1)

    assert first.endpoint == "https://0x0.st"
    assert session.post.call_args[0][0] == "https://0x0.st"
    assert warnings.default_endpoint_warned
    assert sum("public" in r.getMessage() for r in caplog.records) == 1


def test_configured_endpoint_does_not_warn(log_file, caplog):
    warnings = WarningState()
    sink = UploadSink("https://paste.test", warnings, session=_session())
    with caplog.at_level(logging.WARNING, logger="kubelogns"):
        sink.upload(str(log_file), 1)
    assert not warnings.default_endpoint_warned
    assert caplog.records == []


def test_network_error_raises_upload_error(log_file):
    session = _session()
    session.post.side_effect = requests.ConnectionError("connection refused")
    sink = UploadSink("https://paste.test", WarningState(), session=session)
    with pytest.raises(UploadError, match="connection refused"):
        sink.upload(str(log_file), 1)
    assert session.post.call_count == 1


def test_http_error_raises_upload_error(log_file):
    session = _session(text="rate limited", status_code=429)
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError("429 Client Error")
    sink = UploadSink("https://paste.test", WarningState(), session=session)
    with pytest.raises(UploadError, match="429"):
        sink.upload(str(log_file), 1)


def test_missing_file_raises_upload_error(tmp_path):
    session = _session()
    sink = UploadSink("https://paste.test", WarningState(), session=session)
    with pytest.raises(UploadError, match="Cannot read"):
        sink.upload(str(tmp_path / "missing.txt"), 1)
    session.post.assert_not_called()


def test_default_endpoint_warning_printed_once_on_console(log_file, capsys):
    warnings = WarningState()
    sink = UploadSink(None, warnings, session=_session())
    sink.upload(str(log_file), 1)
    sink.upload(str(log_file), 1)
    out = capsys.readouterr().out.splitlines()
    assert out == ["WARN: No upload server provided, using default https://0x0.st (This UPLOADS Everything!!!)"]


def test_close_releases_own_session_only():
    with patch("kubelogns.upload.requests.Session") as session_cls:
        with UploadSink(None, WarningState()) as sink:
            assert sink.session is session_cls.return_value
    session_cls.return_value.close.assert_called_once_with()

    injected = _session()
    UploadSink(None, WarningState(), session=injected).close()
    injected.close.assert_not_called()
