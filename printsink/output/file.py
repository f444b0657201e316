"""
Append-only file output.

The file is created (if needed) and opened at construction time, so a bad
path fails immediately with a typed error instead of on the first write.
Writes run on the output's serial worker; each one seeks to the current end
of the file before appending, so a file truncated by someone else between
writes is appended to at its new end.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import BinaryIO
from urllib.parse import unquote, urlparse

from ..exceptions import (
    CannotCreateFileError,
    FileUnavailableError,
    InvalidPathError,
    PathIsDirectoryError,
)
from .interface import Output
from .worker import ErrorCallback, SerialWorker


def _resolve_path(location: str | os.PathLike[str]) -> Path:
    """Turn a path-like or ``file://`` URL into a Path, rejecting anything else."""
    if isinstance(location, os.PathLike):
        location = os.fspath(location)
    if not isinstance(location, str):
        raise InvalidPathError(
            f"Expected a path or file URL, got {type(location).__name__}"
        )
    if not location or "\x00" in location:
        raise InvalidPathError("Path is empty or malformed", path=repr(location))

    parsed = urlparse(location)
    if parsed.scheme == "file":
        if parsed.netloc not in ("", "localhost"):
            raise InvalidPathError("File URL must be local", path=location)
        location = unquote(parsed.path)
        if not location:
            raise InvalidPathError("File URL has no path", path=location)
    elif parsed.scheme and len(parsed.scheme) > 1 and "://" in location:
        # Single-letter schemes are Windows drive letters, not URLs.
        raise InvalidPathError(
            f"Unsupported URL scheme '{parsed.scheme}'", path=location
        )
    return Path(location)


class FileOutput(Output):
    """
    Append UTF-8 text to a file.

    Example:
        with FileOutput("/tmp/app.log") as output:
            output.write("line1\\n")
            output.write("line2\\n")
        # closing drains pending writes

    Raises (at construction):
        InvalidPathError: Path is empty, malformed, or a non-file URL
        PathIsDirectoryError: Path is an existing directory
        CannotCreateFileError: File is missing and cannot be created
        FileUnavailableError: File cannot be opened for appending
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        encoding: str = "utf-8",
        create_parents: bool = False,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """
        Open (creating if absent) the file for appending.

        Args:
            path: Filesystem path or ``file://`` URL
            encoding: Text encoding for written strings
            create_parents: Create missing parent directories first
            on_error: Optional callback for write failures on the worker
        """
        self._closed = True
        self._path = _resolve_path(path)
        self._encoding = encoding
        self._handle = self._open(self._path, create_parents)
        self._close_lock = threading.Lock()
        self._closed = False
        self._worker = SerialWorker("file", on_error=on_error)

    @staticmethod
    def _open(path: Path, create_parents: bool) -> BinaryIO:
        if path.is_dir():
            raise PathIsDirectoryError("Path is a directory", path=str(path))

        if not path.exists():
            try:
                if create_parents:
                    path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
            except OSError as e:
                raise CannotCreateFileError(
                    "Cannot create file", path=str(path), reason=e.strerror
                ) from e

        try:
            return open(path, "ab")
        except OSError as e:
            raise FileUnavailableError(
                "Cannot open file for writing", path=str(path), reason=e.strerror
            ) from e

    @property
    def path(self) -> Path:
        return self._path

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, string: str) -> None:
        self._worker.submit(self._append, string)

    def drain(self, timeout: float | None = None) -> bool:
        return self._worker.drain(timeout)

    def close(self) -> None:
        """Apply pending writes, then release the file handle (once)."""
        if self._closed:
            return
        with self._close_lock:
            if self._closed:
                return
            self._worker.stop(timeout=None)
            self._handle.close()
            self._closed = True

    def _append(self, string: str) -> None:
        if self._closed:
            return
        data = string.encode(self._encoding)
        self._handle.seek(0, os.SEEK_END)
        self._handle.write(data)
        self._handle.flush()

    def __enter__(self) -> FileOutput:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()

    def __repr__(self) -> str:
        return f"FileOutput({str(self._path)!r})"
