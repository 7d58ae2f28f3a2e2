"""
Data Models for Lexicons, Scored Tweets and Run Summaries
==========================================================

This module defines the core data structures used throughout the sentiment
pipeline. These dataclasses provide type-safe containers for scored tweets,
lexicon parse reports, error tracking and whole-run statistics.

Data Models:
- ScoredRecord: One tweet line with its source, line number and score
- ProcessingError: A recoverable failure (bad lexicon line, unreadable file)
- ParseReport: The merged lexicon plus what went wrong while building it
- AnalysisSummary: Statistics for one completed analysis run
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

POSITIVE = "Positive"
NEGATIVE = "Negative"
NEUTRAL = "Neutral"


def sentiment_label(score: float) -> str:
    """Map a score to Positive (> 0), Negative (< 0) or Neutral (== 0)."""
    if score > 0:
        return POSITIVE
    if score < 0:
        return NEGATIVE
    return NEUTRAL


@dataclass(frozen=True)
class ScoredRecord:
    """
    A single tweet and its sentiment score.

    Attributes:
        source: File name the tweet was read from
        line_number: 1-based line number inside the source file
        text: Raw tweet text
        score: Sentiment score rounded to one decimal place
    """
    source: str
    line_number: int
    text: str
    score: float

    @property
    def key(self) -> str:
        """Unique result key: "<source>_<line>: <text>"."""
        return f"{self.source}_{self.line_number}: {self.text}"

    @property
    def label(self) -> str:
        return sentiment_label(self.score)


@dataclass
class ProcessingError:
    """
    Represents a recoverable error encountered during processing.

    Used to track malformed lexicon lines and unreadable files so that
    batch processing can continue while failures are still reported.

    Attributes:
        file_path: Path to the file that caused the error
        error_type: Category of error ("MalformedLexiconLine", "FileReadFailure",
            "SummaryWriteFailure")
        error_message: Detailed description of what went wrong
        line_number: 1-based line number, when the error concerns one line
        timestamp: When the error occurred
    """
    file_path: Path
    error_type: str
    error_message: str
    line_number: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ParseReport:
    """
    Result of building a lexicon from one file or a directory of files.

    Attributes:
        lexicon: Merged word -> score mapping
        files_parsed: Number of files that were read successfully
        errors: Malformed lines and file failures, in no particular order
    """
    lexicon: Dict[str, float]
    files_parsed: int = 0
    errors: List[ProcessingError] = field(default_factory=list)

    @property
    def malformed_lines(self) -> int:
        return sum(1 for e in self.errors if e.error_type == "MalformedLexiconLine")

    @property
    def failed_files(self) -> int:
        return sum(1 for e in self.errors if e.error_type == "FileReadFailure")


@dataclass
class AnalysisSummary:
    """
    Statistics for one completed analysis run.

    Attributes:
        output_file: Where the formatted results were written
        lexicon_size: Number of distinct words in the lexicon
        record_count: Number of scored tweets written
        files_processed: Tweet files scored successfully
        files_failed: Tweet files whose contribution was dropped
        label_counts: Positive/Negative/Neutral totals
        errors: Every recoverable error from lexicon and tweet stages
    """
    output_file: Path
    lexicon_size: int
    record_count: int
    files_processed: int
    files_failed: int
    label_counts: Dict[str, int] = field(default_factory=dict)
    errors: List[ProcessingError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when every tweet file contributed to the output."""
        return self.files_failed == 0
