"""Finding and extracting a tool's binary from zip and tar archives."""

from __future__ import annotations

import io
import logging
import sys
import tarfile
import time
import zipfile
from dataclasses import dataclass
from pathlib import PurePosixPath

from rokit.errors import RokitError

_log = logging.getLogger(__name__)

EXE_EXTENSION = "exe" if sys.platform in ("win32", "cygwin") else ""
EXE_SUFFIX = f".{EXE_EXTENSION}" if EXE_EXTENSION else ""

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _file_name(path: str) -> str | None:
    name = PurePosixPath(path).name
    return name if name and name != ".." else None


def _extension(path: str) -> str | None:
    name = _file_name(path)
    if name is None:
        return None
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


@dataclass(frozen=True)
class Candidate:
    """An archive entry that may be the wanted binary, with what matched."""

    path: str
    matched_full_path: bool
    matched_file_exact: bool
    matched_file_inexact: bool
    has_exec_perms: bool
    has_exec_suffix: bool

    def priority(self) -> int:
        """Return how many properties of this entry matched."""
        return sum(
            (
                self.matched_full_path,
                self.matched_file_exact,
                self.matched_file_inexact,
                self.has_exec_perms,
                self.has_exec_suffix,
            )
        )


def find_best_candidate(entry_paths, desired_file_path: str) -> Candidate | None:
    """Pick the entry that best matches the desired path.

    entry_paths holds (path, permissions) pairs, with permissions None where
    unknown. Among equally good entries the last one wins.
    """
    desired_name = _file_name(desired_file_path)
    if desired_name is None:
        return None
    desired_path = PurePosixPath(desired_file_path)
    desired_lower = desired_name.translate(_ASCII_LOWER)

    candidates = []
    for path, perms in entry_paths:
        if path.endswith("/"):
            continue
        file_name = _file_name(path)
        candidate = Candidate(
            path=path,
            matched_full_path=PurePosixPath(path) == desired_path,
            matched_file_exact=file_name == desired_name,
            matched_file_inexact=file_name is not None
            and file_name.translate(_ASCII_LOWER) == desired_lower,
            has_exec_perms=perms is not None and (perms & 0o111) != 0,
            has_exec_suffix=_extension(path) == EXE_EXTENSION,
        )
        if candidate.priority() > 0:
            candidates.append(candidate)

    if not candidates:
        return None
    best = max(reversed(candidates), key=Candidate.priority)
    _log.debug("found candidate %s", best.path)
    return best


def extract_zip_file(zip_contents: bytes, desired_file_name: str) -> bytes | None:
    """Extract the best match for a binary name from a zip archive, or None."""
    desired = f"{desired_file_name}{EXE_SUFFIX}"
    data = bytes(zip_contents)
    start = time.perf_counter()
    found = None
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            entries = [(name, None) for name in archive.namelist()]
            best = find_best_candidate(entries, desired)
            if best is not None:
                try:
                    found = archive.read(best.path)
                except KeyError:
                    found = None
                if found is None:
                    _log.warning(
                        "found candidate path %s, but failed to extract file", best.path
                    )
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as err:
        raise RokitError(f"Zip file error: {err}") from err
    _log.debug(
        "extracted zip file (%d KiB) in %.3fs, found=%s",
        len(data) // 1024,
        time.perf_counter() - start,
        found is not None,
    )
    return found


def extract_tar_file(tar_contents: bytes, desired_file_name: str) -> bytes | None:
    """Extract the best match for a binary name from an uncompressed tar archive."""
    desired = f"{desired_file_name}{EXE_SUFFIX}"
    data = bytes(tar_contents)
    if not data:
        return None
    start = time.perf_counter()
    found = None
    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:") as archive:
            members = [member for member in archive.getmembers() if not member.isdir()]
            entries = [(member.name, member.mode) for member in members]
            best = find_best_candidate(entries, desired)
            if best is not None:
                member = next((m for m in members if m.name == best.path), None)
                if member is not None:
                    handle = archive.extractfile(member)
                    if handle is not None:
                        with handle:
                            found = handle.read()
                if found is None:
                    _log.warning(
                        "found candidate path %s, but failed to extract file", best.path
                    )
    except (tarfile.TarError, OSError, EOFError) as err:
        raise RokitError(f"I/O error: {err}") from err
    _log.debug(
        "extracted tar file (%d KiB) in %.3fs, found=%s",
        len(data) // 1024,
        time.perf_counter() - start,
        found is not None,
    )
    return found