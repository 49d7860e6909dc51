import io
import tarfile
import zipfile

import pytest

from rokit.errors import RokitError
from rokit.extraction import (
    EXE_SUFFIX,
    Candidate,
    extract_tar_file,
    extract_zip_file,
    find_best_candidate,
)


def _make_zip(files):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, contents in files:
            archive.writestr(name, contents)
    return buffer.getvalue()


def _make_tar(files):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as archive:
        for name, contents, mode in files:
            info = tarfile.TarInfo(name)
            info.size = len(contents)
            info.mode = mode
            archive.addfile(info, io.BytesIO(contents))
    return buffer.getvalue()


def test_priority_counts_matches():
    candidate = Candidate("tool", True, True, True, False, False)
    assert candidate.priority() == 3
    assert Candidate("x", False, False, False, False, False).priority() == 0


def test_full_path_match_beats_name_match():
    best = find_best_candidate([("a/tool", None), ("tool", None)], "a/tool")
    assert best.path == "a/tool"
    assert best.matched_full_path


def test_inexact_name_matches():
    best = find_best_candidate([("bin/TOOL", None), ("README.md", None)], "tool")
    assert best.path == "bin/TOOL"
    assert best.matched_file_inexact
    assert not best.matched_file_exact


def test_exec_perms_used():
    best = find_best_candidate([("a", 0o644), ("b", 0o755)], "tool")
    assert best.path == "b"
    assert best.has_exec_perms


def test_ties_prefer_last_entry():
    best = find_best_candidate([("a/tool", None), ("b/tool", None)], "tool")
    assert best.path == "b/tool"


def test_no_match_and_directories_skipped():
    assert find_best_candidate([("tool/", None), ("readme", None)], "tool") is None


def test_extract_zip_finds_tool():
    tool_name = f"tool-1.0/tool{EXE_SUFFIX}"
    data = _make_zip([("tool-1.0/", b""), ("README.md", b"docs"), (tool_name, b"BINARY")])
    assert extract_zip_file(data, "tool") == b"BINARY"


def test_extract_zip_missing_returns_none():
    data = _make_zip([("README.md", b"docs")])
    assert extract_zip_file(data, "tool") is None


def test_extract_zip_invalid_raises():
    with pytest.raises(RokitError):
        extract_zip_file(b"not a zip archive", "tool")


def test_extract_tar_finds_tool():
    data = _make_tar(
        [
            ("other", b"OTHER", 0o644),
            (f"dist/tool{EXE_SUFFIX}", b"TOOLBIN", 0o755),
        ]
    )
    assert extract_tar_file(data, "tool") == b"TOOLBIN"


def test_extract_tar_missing_returns_none():
    data = _make_tar([("notes.txt", b"x", 0o644)])
    assert extract_tar_file(data, "tool") is None


def test_extract_tar_empty_returns_none():
    assert extract_tar_file(b"", "tool") is None