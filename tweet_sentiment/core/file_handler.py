"""
File Handling Utilities for Lexicon and Tweet Files
====================================================

This module provides the file I/O used by every stage of the pipeline:
reading line-oriented text files with automatic encoding detection,
discovering files under a directory tree, and writing output files
atomically.

Key Features:
- Automatic encoding detection using chardet library
- File size limits to prevent memory issues with large files
- Line splitting that accepts \\n, \\r\\n and \\r line endings
- Recursive directory listing of regular files
- Atomic writes: a failed write never leaves a partial file behind

The encoding detection strategy:
1. Try the preferred encodings (UTF-8) in order
2. If all fail, use chardet to detect the actual encoding
3. Fall back to latin-1, which can decode any byte sequence
"""

import os
import tempfile
from pathlib import Path
from typing import List

import chardet

from ..config.settings import (
    ENCODING_PREFERENCES,  # Encodings tried before chardet
    FALLBACK_ENCODING,     # Last resort when detection fails
    MAX_FILE_SIZE_MB,      # Maximum file size to read
    OUTPUT_ENCODING,
)
from ..utils.logger import get_logger
from .errors import FileReadError, OutputWriteError

# Initialize module logger for file operation tracking
logger = get_logger(__name__)


def split_lines(text: str) -> List[str]:
    """
    Split text into lines, dropping line terminators.

    A trailing newline does not produce an extra empty line, and empty
    text yields no lines at all.
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class FileHandler:
    """
    Handles file I/O operations with encoding detection.

    The handler keeps no state, so one instance can be shared by all
    worker threads of a run.

    Usage:
        handler = FileHandler()
        lines = handler.read_lines(Path("tweets.txt"))
        handler.write_file(Path("outputFile.txt"), content)
    """

    def read_text(self, file_path: Path) -> str:
        """
        Read file content with automatic encoding detection.

        Args:
            file_path: Path to the file to read

        Returns:
            File content as string

        Raises:
            FileReadError: If the file is missing, too large or unreadable
        """
        file_path = Path(file_path)

        try:
            file_size_mb = file_path.stat().st_size / (1024 * 1024)
            if file_size_mb > MAX_FILE_SIZE_MB:
                raise FileReadError(f"File too large ({file_size_mb:.1f} MB): {file_path}")

            raw_data = file_path.read_bytes()
        except FileReadError:
            raise
        except OSError as e:
            raise FileReadError(f"Cannot read {file_path}: {e}") from e

        # STRATEGY 1: Try preferred encodings in order
        for encoding in ENCODING_PREFERENCES:
            try:
                content = raw_data.decode(encoding)
                logger.debug(f"Read {file_path} with {encoding} encoding")
                return content
            except UnicodeDecodeError:
                continue

        # STRATEGY 2: Use chardet to detect encoding
        detected = chardet.detect(raw_data).get("encoding")
        if detected:
            try:
                content = raw_data.decode(detected)
                logger.info(f"Detected encoding {detected} for {file_path}")
                return content
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"Detected encoding {detected} failed for {file_path}")

        # STRATEGY 3: latin-1 decodes any byte sequence
        logger.warning(f"Could not detect encoding for {file_path}, using {FALLBACK_ENCODING}")
        return raw_data.decode(FALLBACK_ENCODING)

    def read_lines(self, file_path: Path) -> List[str]:
        """Read a file and return its lines in order, without terminators."""
        return split_lines(self.read_text(file_path))

    def list_files(self, directory: Path) -> List[Path]:
        """
        Recursively list all regular files under a directory.

        Args:
            directory: Directory path to search

        Returns:
            Sorted list of Path objects for every regular file in the tree

        Raises:
            FileReadError: If the directory cannot be traversed
        """
        directory = Path(directory)
        files = []

        def _raise(error: OSError):
            raise FileReadError(f"Cannot list {directory}: {error}") from error

        for root, _dirs, names in os.walk(directory, onerror=_raise):
            for name in names:
                path = Path(root) / name
                if path.is_file():
                    files.append(path)

        # Return sorted for consistent ordering
        return sorted(files)

    def _target_mode(self, file_path: Path) -> int:
        """Mode for a written file: keep an existing file's mode, else follow the umask."""
        if file_path.exists():
            return file_path.stat().st_mode & 0o777
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def write_file(self, file_path: Path, content: str, encoding: str = OUTPUT_ENCODING):
        """
        Write content to a file atomically, creating parent directories.

        The content is written to a temporary file in the destination
        directory and moved into place with ``os.replace``. If anything
        fails, the temporary file is removed and the destination is left
        as it was.

        Args:
            file_path: Path to the output file
            content: String content to write
            encoding: Character encoding for output (default: UTF-8)

        Raises:
            OutputWriteError: If the file cannot be written
        """
        file_path = Path(file_path)
        temp_path = None

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            fd, temp_name = tempfile.mkstemp(
                dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
            )
            temp_path = Path(temp_name)
            with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            # mkstemp creates the file owner-only
            os.chmod(temp_path, self._target_mode(file_path))
            os.replace(temp_path, file_path)
            temp_path = None
            logger.debug(f"Successfully wrote file: {file_path}")

        except OSError as e:
            logger.error(f"Error writing file {file_path}: {e}")
            raise OutputWriteError(f"Cannot write {file_path}: {e}") from e

        finally:
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()
