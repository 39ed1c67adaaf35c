from __future__ import annotations

import asyncio
from pathlib import Path

from steam_deploy.core.log_collector import LogCollector
from steam_deploy.utils.file_utils import LocalFileSystem

from conftest import RecordingReporter


class DenyingFileSystem(LocalFileSystem):
    def __init__(self, denied: str) -> None:
        self.denied = denied

    async def read_text(self, path: Path) -> str:
        if Path(path).name == self.denied:
            raise PermissionError(f"Permission denied: '{path}'")
        return await super().read_text(path)


def _collect(collector: LogCollector, directory: Path, recursive: bool = True):
    return asyncio.run(collector.collect(directory, recursive=recursive))


def test_each_file_is_wrapped_in_a_group(tmp_path: Path, reporter: RecordingReporter) -> None:
    (tmp_path / "bootstrap_log.txt").write_text("boot ok", encoding="utf-8")
    (tmp_path / "console_log.txt").write_text("line 1\nline 2", encoding="utf-8")

    result = _collect(LogCollector(reporter), tmp_path)

    assert reporter.lines == [
        str(tmp_path),
        "::group::bootstrap_log.txt",
        "boot ok",
        "::endgroup::",
        "::group::console_log.txt",
        "line 1\nline 2",
        "::endgroup::",
    ]
    assert result.success
    assert [p.name for p in result.files] == ["bootstrap_log.txt", "console_log.txt"]


def test_unreadable_file_is_reported_and_collection_continues(tmp_path: Path, reporter: RecordingReporter) -> None:
    (tmp_path / "a.log").write_text("alpha contents", encoding="utf-8")
    (tmp_path / "b.log").write_text("secret", encoding="utf-8")

    result = _collect(LogCollector(reporter, DenyingFileSystem("b.log")), tmp_path)

    errors = reporter.commands("error")
    assert len(errors) == 1
    assert "b.log" in errors[0]
    assert "alpha contents" in reporter.lines
    assert "secret" not in reporter.lines
    assert [p.name for p in result.files] == ["a.log"]
    assert [e.path.name for e in result.errors] == ["b.log"]


def test_missing_directory_reports_single_error(tmp_path: Path, reporter: RecordingReporter) -> None:
    missing = tmp_path / "logs"

    result = _collect(LogCollector(reporter), missing)

    assert len(reporter.commands("error")) == 1
    assert reporter.commands("group") == []
    assert result.directory_error is not None
    assert result.files == []


def test_recursive_collection_descends_into_subdirectories(tmp_path: Path, reporter: RecordingReporter) -> None:
    (tmp_path / "top.log").write_text("top", encoding="utf-8")
    nested = tmp_path / "workshop"
    nested.mkdir()
    (nested / "upload.log").write_text("nested", encoding="utf-8")

    _collect(LogCollector(reporter), tmp_path, recursive=True)

    assert "::group::workshop/upload.log" in reporter.lines
    assert "::group::top.log" in reporter.lines
    assert "::group::workshop" not in reporter.lines


def test_shallow_collection_skips_subdirectories(tmp_path: Path, reporter: RecordingReporter) -> None:
    (tmp_path / "top.log").write_text("top", encoding="utf-8")
    nested = tmp_path / "workshop"
    nested.mkdir()
    (nested / "upload.log").write_text("nested", encoding="utf-8")

    result = _collect(LogCollector(reporter), tmp_path, recursive=False)

    assert reporter.commands("group") == ["::group::top.log"]
    assert [p.name for p in result.files] == ["top.log"]
