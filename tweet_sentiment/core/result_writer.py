"""
Result Writer
=============

Turns a finished set of tweet scores into the human-readable results file.

Each tweet becomes one block::

    Tweet: "<source>_<line>: <text>"
    Sentiment Score: <score> (<label>)
    ________________________________________________________________________________

Blocks are written sorted by key. The file is written atomically through
FileHandler, so a failed write leaves no partial results behind. Blocks can
also be echoed to stdout, and a tabular summary can be exported as CSV
with pandas.
"""

from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

import pandas as pd

from ..config.settings import OUTPUT_FILENAME, RESULT_DELIMITER, SCORE_DECIMALS
from ..models.results import ScoredRecord, sentiment_label, POSITIVE, NEGATIVE, NEUTRAL
from ..utils.logger import get_logger
from .file_handler import FileHandler

logger = get_logger(__name__)

SUMMARY_COLUMNS = ["key", "source", "line_number", "text", "score", "label"]


def resolve_output_file(output_path: Path) -> Path:
    """An existing directory gets OUTPUT_FILENAME inside it; anything else is the file itself."""
    output_path = Path(output_path)
    if output_path.is_dir():
        return output_path / OUTPUT_FILENAME
    return output_path


def format_block(key: str, score: float) -> str:
    """Format one tweet's result block, ending with the delimiter line."""
    return (
        f"\nTweet: \"{key}\"\n"
        f"Sentiment Score: {score:.{SCORE_DECIMALS}f} ({sentiment_label(score)})\n"
        f"{RESULT_DELIMITER}\n"
    )


def render_results(scores: Mapping[str, float]) -> str:
    """Render every result block, sorted by key."""
    return "".join(format_block(key, scores[key]) for key in sorted(scores))


def records_to_frame(records: Iterable[ScoredRecord]) -> pd.DataFrame:
    """Build a summary DataFrame with one row per scored tweet."""
    rows = [
        {
            "key": r.key,
            "source": r.source,
            "line_number": r.line_number,
            "text": r.text,
            "score": r.score,
            "label": r.label,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def summarize_labels(scores: Mapping[str, float]) -> Dict[str, int]:
    """Count Positive/Negative/Neutral results; every label is present."""
    labels = pd.Series([sentiment_label(s) for s in scores.values()], dtype="object")
    counts = labels.value_counts()
    return {label: int(counts.get(label, 0)) for label in (POSITIVE, NEGATIVE, NEUTRAL)}


class ResultWriter:
    """
    Persists and displays the results of an analysis run.

    Attributes:
        file_handler: FileHandler used for atomic writes
        echo: Print every block to stdout as well
    """

    def __init__(self, file_handler: Optional[FileHandler] = None, echo: bool = True):
        self.file_handler = file_handler or FileHandler()
        self.echo = echo

    def write_results(self, scores: Mapping[str, float], output_path: Path) -> Path:
        """
        Write all result blocks to the output location.

        Args:
            scores: Result key -> score for the whole run
            output_path: Output file, or an existing directory

        Returns:
            Path of the file that was written

        Raises:
            OutputWriteError: If the file cannot be written
        """
        output_file = resolve_output_file(output_path)
        content = render_results(scores)

        self.file_handler.write_file(output_file, content)
        logger.info(f"Results for {len(scores)} tweets saved to: {output_file}")

        if self.echo:
            print(content, end="")

        return output_file

    def save_summary_csv(self, records: Iterable[ScoredRecord], csv_path: Path) -> Path:
        """
        Save a CSV summary (key, source, line_number, text, score, label).

        Raises:
            OutputWriteError: If the file cannot be written
        """
        frame = records_to_frame(records)
        csv_path = Path(csv_path)
        self.file_handler.write_file(csv_path, frame.to_csv(index=False))
        logger.info(f"Summary CSV saved to: {csv_path}")
        return csv_path
