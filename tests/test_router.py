"""Tests for routing captured logs to the run's destination."""

import os

import pytest

from kubelogns.exceptions import DirectoryCreateError, FileWriteError, LogFetchError
from kubelogns.models import Console, File, FileAndUpload, LogRecord, Pod
from kubelogns.router import OutputRouter, output_paths

from conftest import FakeSink


def _record(name="web-1", namespace="default", text=b"hello\nworld\n"):
    return LogRecord(Pod(namespace, name), text)


# =============================================================================
# Path derivation
# =============================================================================

def test_output_paths_with_extension():
    assert output_paths("logs.txt", "default") == ("logs", os.path.join("logs", "default_logs.txt"))


def test_output_paths_without_dot():
    assert output_paths("report", "default") == ("report", os.path.join("report", "default_report"))


def test_output_paths_cut_at_first_dot():
    assert output_paths("app.log.gz", "ns1") == ("app", os.path.join("app", "ns1_app.log.gz"))


# =============================================================================
# Console and file destinations
# =============================================================================

def test_console_mode_prints_separator_only(workdir, capsys, limiter, sleeper):
    router = OutputRouter(Console(), limiter=limiter)
    outcome = router.route(_record())
    assert outcome.path is None
    assert not outcome.written
    assert capsys.readouterr().out == "---\n"
    assert os.listdir(workdir) == []
    assert sleeper.calls == []


def test_file_mode_writes_verbatim(workdir, limiter, sleeper):
    router = OutputRouter(File("logs.txt"), limiter=limiter)
    outcome = router.route(_record(text=b"raw \x00 bytes\nno prefix\n"))
    assert outcome.written
    assert outcome.path == os.path.join("logs", "default_logs.txt")
    assert (workdir / "logs" / "default_logs.txt").read_bytes() == b"raw \x00 bytes\nno prefix\n"
    assert sleeper.calls == []


def test_file_mode_overwrites_and_same_namespace_collides(workdir, limiter):
    router = OutputRouter(File("report"), limiter=limiter)
    router.route(_record(name="web-1", text=b"first\n"))
    router.route(_record(name="web-2", text=b"second\n"))
    router.route(_record(name="db-0", namespace="data", text=b"third\n"))
    assert (workdir / "report" / "default_report").read_bytes() == b"second\n"
    assert (workdir / "report" / "data_report").read_bytes() == b"third\n"


def test_failed_capture_is_written_as_sentinel(workdir, limiter):
    router = OutputRouter(File("logs.txt"), limiter=limiter)
    router.route(LogRecord.failure(Pod("default", "web-2"), LogFetchError("boom")))
    assert (workdir / "logs" / "default_logs.txt").read_text() == "Unable to get pod logs"


def test_directory_create_failure_is_reported_and_skips_upload(workdir, capsys, limiter, sleeper):
    (workdir / "logs").write_text("not a directory")
    sink = FakeSink()
    router = OutputRouter(FileAndUpload("logs.txt"), sink=sink, limiter=limiter)

    outcome = router.route(_record())

    assert isinstance(outcome.error, DirectoryCreateError)
    assert not outcome.written
    assert outcome.upload is None
    assert sink.uploaded == []
    assert sleeper.calls == []
    assert "ERR: Error writing logs to" in capsys.readouterr().out


def test_file_write_failure_is_reported(workdir, capsys, limiter):
    (workdir / "logs" / "default_logs.txt").mkdir(parents=True)
    router = OutputRouter(File("logs.txt"), limiter=limiter)
    outcome = router.route(_record())
    assert isinstance(outcome.error, FileWriteError)
    assert outcome.error.path == os.path.join("logs", "default_logs.txt")
    assert "ERR" in capsys.readouterr().out


# =============================================================================
# Upload destination
# =============================================================================

def test_upload_prints_url_and_removes_placeholder_file(workdir, capsys, limiter, sleeper):
    sink = FakeSink()
    router = OutputRouter(FileAndUpload("tmp", ephemeral=True), sink=sink, limiter=limiter)

    outcome = router.route(_record())

    path = os.path.join("tmp", "default_tmp")
    assert sink.uploaded == [(path, 1, b"hello\nworld\n")]
    assert outcome.upload.ok
    assert outcome.upload.url == "https://paste.test/1"
    assert outcome.removed
    assert not (workdir / "tmp" / "default_tmp").exists()
    assert capsys.readouterr().out == "https://paste.test - ( web-1 ): https://paste.test/1\n"
    assert sleeper.calls == [1.0]


def test_upload_keeps_explicitly_named_file(workdir, limiter):
    sink = FakeSink()
    router = OutputRouter(FileAndUpload("logs.txt", expires=12), sink=sink, limiter=limiter)
    outcome = router.route(_record())
    assert outcome.upload.ok
    assert not outcome.removed
    assert sink.uploaded[0][1] == 12
    assert (workdir / "logs" / "default_logs.txt").exists()


def test_failed_upload_is_surfaced_and_still_paced(workdir, capsys, limiter, sleeper):
    path = os.path.join("tmp", "default_tmp")
    sink = FakeSink(fail_paths=[path])
    router = OutputRouter(FileAndUpload("tmp", ephemeral=True), sink=sink, limiter=limiter)

    outcome = router.route(_record())

    assert not outcome.upload.ok
    assert outcome.upload.url is None
    assert not outcome.removed
    assert (workdir / "tmp" / "default_tmp").exists()
    assert "ERR: https://paste.test - ( web-1 ): Upload of" in capsys.readouterr().out
    assert sleeper.calls == [1.0]


def test_upload_destination_requires_sink():
    with pytest.raises(ValueError):
        OutputRouter(FileAndUpload("tmp"))
