"""
Sentiment Analysis Manager
==========================

Coordinates one analysis run:

1. Check the lexicon path exists, then build the lexicon (file or directory)
2. Check the tweet path exists
3. Score every tweet file: one task per file on the worker pool for a
   directory, inline for a single file
4. Hand the complete set of results to the ResultWriter

Only a missing lexicon/tweet path or a failed output write ends the run with
an error. A tweet file that cannot be read is logged and left out; the other
files are still scored and written.

The lexicon is fully built and wrapped read-only before the first scoring
task starts, so workers share it without locking. Scored batches are merged
into a lock-guarded ResultSet.
"""

from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..config.settings import DEFAULT_MAX_WORKERS
from ..models.results import AnalysisSummary, ParseReport, ProcessingError, ScoredRecord
from ..utils.logger import get_logger, log_error
from .errors import OutputWriteError, PathNotFoundError
from .file_handler import FileHandler
from .lexicon_parser import LexiconParser
from .record_loader import RecordLoader
from .result_set import ResultSet
from .result_writer import ResultWriter, summarize_labels
from .scorer import LexiconScorer, Scorer
from .worker_pool import FileTaskResult, run_file_tasks

logger = get_logger(__name__)


class SentimentAnalysisManager:
    """
    Manages the process of sentiment analysis: parsing lexicons, scoring
    tweets and writing results.

    Every collaborator can be swapped for another object with the same
    methods, which is how tests substitute failing loaders or writers.

    Attributes:
        lexicon_parser: Builds the lexicon from a file or directory
        record_loader: Reads tweet files line by line
        scorer: Scores one tweet against the lexicon
        result_writer: Persists the final results
        file_handler: Lists tweet files under a directory
        max_workers: Upper bound on threads for directory processing
        summary_csv: Optional path for a CSV summary of all scored tweets
    """

    def __init__(self,
                 lexicon_parser: Optional[LexiconParser] = None,
                 record_loader: Optional[RecordLoader] = None,
                 scorer: Optional[Scorer] = None,
                 result_writer: Optional[ResultWriter] = None,
                 max_workers: Optional[int] = None,
                 summary_csv: Optional[Path] = None,
                 file_handler: Optional[FileHandler] = None):
        self.max_workers = max_workers or DEFAULT_MAX_WORKERS
        self.lexicon_parser = lexicon_parser or LexiconParser(max_workers=self.max_workers)
        self.record_loader = record_loader or RecordLoader()
        self.scorer = scorer or LexiconScorer()
        self.result_writer = result_writer or ResultWriter()
        self.summary_csv = Path(summary_csv) if summary_csv else None
        self.file_handler = file_handler or FileHandler()

    def load_lexicon(self, lexicon_path: Path) -> ParseReport:
        """
        Validate the lexicon path and build the lexicon.

        Raises:
            PathNotFoundError: If the lexicon path does not exist
        """
        lexicon_path = Path(lexicon_path)
        if not lexicon_path.exists():
            raise PathNotFoundError(f"Lexicon path does not exist: {lexicon_path}")

        logger.info(f"Loading lexicon from: {lexicon_path}")
        return self.lexicon_parser.parse(lexicon_path)

    def score_file(self, file_path: Path, lexicon: Mapping[str, float]) -> List[ScoredRecord]:
        """
        Load one tweet file and score each line.

        Records are keyed by the file's name and 1-based line number.

        Raises:
            FileReadError: If the file cannot be read
        """
        file_path = Path(file_path)
        tweets = self.record_loader.load(file_path)
        source = file_path.name

        return [
            ScoredRecord(
                source=source,
                line_number=line_number,
                text=tweet,
                score=self.scorer.score(tweet, lexicon),
            )
            for line_number, tweet in enumerate(tweets, 1)
        ]

    def score_tweets(self, tweet_path: Path, lexicon: Mapping[str, float],
                     result_set: ResultSet) -> List[FileTaskResult]:
        """
        Score a tweet file or every file under a tweet directory.

        Args:
            tweet_path: File or directory of tweet files
            lexicon: Completed, read-only lexicon
            result_set: Shared accumulator for scored tweets

        Returns:
            One FileTaskResult per tweet file; failed files carry an error
        """
        tweet_path = Path(tweet_path)

        if tweet_path.is_dir():
            file_paths = self.file_handler.list_files(tweet_path)
            if not file_paths:
                logger.warning(f"No tweet files found in {tweet_path}")

            def task(path: Path) -> int:
                return result_set.add_batch(self.score_file(path, lexicon))

            return run_file_tasks(
                file_paths, task, max_workers=self.max_workers, description="tweet files"
            )

        try:
            count = result_set.add_batch(self.score_file(tweet_path, lexicon))
        except (OSError, ValueError) as e:
            error = ProcessingError(
                file_path=tweet_path,
                error_type="FileReadFailure",
                error_message=str(e),
            )
            log_error(logger, error)
            return [FileTaskResult(path=tweet_path, error=error)]
        return [FileTaskResult(path=tweet_path, value=count)]

    def perform_analysis(self, lexicon_path: Path, tweet_path: Path,
                         output_path: Path) -> AnalysisSummary:
        """
        Run the full pipeline and write the results.

        Args:
            lexicon_path: Lexicon file or directory
            tweet_path: Tweet file or directory
            output_path: Output file, or an existing directory

        Returns:
            AnalysisSummary describing the run

        Raises:
            PathNotFoundError: If the lexicon or tweet path does not exist
            OutputWriteError: If the results file cannot be written. A failed
                summary CSV is recorded in the summary errors instead
        """
        report = self.load_lexicon(lexicon_path)
        lexicon = MappingProxyType(report.lexicon)

        tweet_path = Path(tweet_path)
        if not tweet_path.exists():
            raise PathNotFoundError(f"Tweet path does not exist: {tweet_path}")

        logger.info(f"Scoring tweets from: {tweet_path}")
        result_set = ResultSet()
        file_results = self.score_tweets(tweet_path, lexicon, result_set)
        file_errors = [r.error for r in file_results if not r.ok]

        scores = result_set.scores()
        output_file = self.result_writer.write_results(scores, Path(output_path))
        summary_errors = []
        if self.summary_csv is not None:
            # The results file is already in place; a CSV failure only loses the summary
            try:
                self.result_writer.save_summary_csv(result_set.records(), self.summary_csv)
            except OutputWriteError as e:
                error = ProcessingError(
                    file_path=self.summary_csv,
                    error_type="SummaryWriteFailure",
                    error_message=str(e),
                )
                log_error(logger, error)
                summary_errors.append(error)

        summary = AnalysisSummary(
            output_file=output_file,
            lexicon_size=len(lexicon),
            record_count=len(scores),
            files_processed=len(file_results) - len(file_errors),
            files_failed=len(file_errors),
            label_counts=summarize_labels(scores),
            errors=report.errors + file_errors + summary_errors,
        )

        logger.info(
            f"Analysis complete: {summary.record_count} tweets from "
            f"{summary.files_processed} files "
            f"(Positive={summary.label_counts['Positive']}, "
            f"Negative={summary.label_counts['Negative']}, "
            f"Neutral={summary.label_counts['Neutral']})"
        )
        if summary.files_failed:
            logger.warning(f"{summary.files_failed} tweet files could not be processed")

        return summary

    run = perform_analysis
