"""
Lexicon Parser
==============

Builds the word -> sentiment weight mapping used to score tweets.

A lexicon source is either one file or a directory tree of files. Every line
of a lexicon file has the form ``word,score`` with optional whitespace around
both fields. Lines that do not split into exactly two fields, or whose score
is not a finite decimal number, are logged and skipped; they never abort the parse.

Words are stored lower-cased so that scoring can case-fold each token and
look it up directly.

When a directory is parsed, each file is read on the worker pool and the
per-file mappings are merged. With deterministic merging (the default)
results are applied in sorted path order, so the last file in that order
wins a duplicate word. Otherwise they are applied in completion order.
"""

import logging
import math
import re
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..config.settings import DETERMINISTIC_LEXICON_MERGE, LEXICON_SEPARATOR
from ..models.results import ParseReport, ProcessingError
from ..utils.logger import get_logger, log_error
from .file_handler import FileHandler
from .worker_pool import run_file_tasks

logger = get_logger(__name__)

# Base-10 floating point literal: 2, -1.5, .5, 3., 1e-3
SCORE_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class MalformedLineError(ValueError):
    """A lexicon line that is not a valid ``word,score`` pair."""


def parse_line(line: str) -> Tuple[str, float]:
    """
    Parse one lexicon line into a (word, score) pair.

    Args:
        line: Raw line without its terminator

    Returns:
        Lower-cased, trimmed word and its score

    Raises:
        MalformedLineError: Wrong field count, empty word or bad number
    """
    parts = line.split(LEXICON_SEPARATOR)
    if len(parts) != 2:
        raise MalformedLineError(f"expected 2 fields, found {len(parts)}: {line!r}")

    word = parts[0].strip()
    raw_score = parts[1].strip()

    if not word:
        raise MalformedLineError(f"empty word: {line!r}")
    if not SCORE_PATTERN.fullmatch(raw_score):
        raise MalformedLineError(f"score is not a number: {line!r}")

    score = float(raw_score)
    if not math.isfinite(score):
        raise MalformedLineError(f"score is out of range: {line!r}")

    return word.lower(), score


class LexiconParser:
    """
    Parses lexicon files to extract word sentiment scores.

    This parser can handle both single files and directories containing
    multiple files.

    Attributes:
        file_handler: FileHandler used to read lexicon files
        max_workers: Upper bound on threads for directory parsing
        deterministic: Merge directory results in sorted path order
    """

    def __init__(self, file_handler: Optional[FileHandler] = None,
                 max_workers: Optional[int] = None,
                 deterministic: bool = DETERMINISTIC_LEXICON_MERGE):
        self.file_handler = file_handler or FileHandler()
        self.max_workers = max_workers
        self.deterministic = deterministic

    def parse(self, path: Path) -> ParseReport:
        """Parse a lexicon file or directory, whichever ``path`` is."""
        path = Path(path)
        if path.is_dir():
            return self.parse_directory(path)
        return self.parse_file_report(path)

    def parse_file_report(self, file_path: Path) -> ParseReport:
        """
        Parse a single lexicon file, keeping track of malformed lines.

        Args:
            file_path: Path to the lexicon file

        Returns:
            ParseReport with the file's mapping and one error per bad line

        Raises:
            FileReadError: If the file cannot be read
        """
        file_path = Path(file_path)
        lexicon: Dict[str, float] = {}
        errors = []

        for line_number, line in enumerate(self.file_handler.read_lines(file_path), 1):
            if not line.strip():
                continue
            try:
                word, score = parse_line(line)
            except MalformedLineError as e:
                error = ProcessingError(
                    file_path=file_path,
                    error_type="MalformedLexiconLine",
                    error_message=str(e),
                    line_number=line_number,
                )
                log_error(logger, error, level=logging.WARNING)
                errors.append(error)
                continue
            lexicon[word] = score

        logger.debug(f"Parsed {len(lexicon)} words from {file_path}")
        return ParseReport(lexicon=lexicon, files_parsed=1, errors=errors)

    def parse_file(self, file_path: Path) -> Dict[str, float]:
        """Parse a single lexicon file and return only its mapping."""
        return self.parse_file_report(file_path).lexicon

    def parse_directory(self, directory: Path) -> ParseReport:
        """
        Parse every regular file under a directory concurrently.

        Unreadable files are logged and left out; the remaining files are
        merged into one mapping. All tasks have finished when this returns.

        Args:
            directory: Directory containing lexicon files (searched recursively)

        Returns:
            ParseReport with the merged mapping and all collected errors
        """
        file_paths = self.file_handler.list_files(Path(directory))
        if not file_paths:
            logger.warning(f"No lexicon files found in {directory}")

        results = run_file_tasks(
            file_paths, self.parse_file_report,
            max_workers=self.max_workers, description="lexicon files",
        )
        if self.deterministic:
            results.sort(key=lambda r: r.path)

        merged = ParseReport(lexicon={})
        for result in results:
            if not result.ok:
                merged.errors.append(result.error)
                continue
            merged.lexicon.update(result.value.lexicon)
            merged.files_parsed += 1
            merged.errors.extend(result.value.errors)

        logger.info(
            f"Loaded lexicon: {len(merged.lexicon)} words from "
            f"{merged.files_parsed}/{len(file_paths)} files "
            f"({merged.malformed_lines} malformed lines skipped)"
        )
        return merged
