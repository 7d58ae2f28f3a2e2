"""
Tweet Sentiment Analyzer
========================

Scores short text records ("tweets") against a word -> weight lexicon and
writes a formatted results file. Lexicons and tweets can each be a single
file or a directory tree; directories are processed one file per task on a
bounded thread pool.

Typical use:
    from tweet_sentiment import SentimentAnalysisManager
    summary = SentimentAnalysisManager().perform_analysis("lexicon/", "tweets/", "out/")
"""

from .core.analysis_manager import SentimentAnalysisManager
from .core.errors import FileReadError, OutputWriteError, PathNotFoundError
from .core.lexicon_parser import LexiconParser
from .core.record_loader import RecordLoader
from .core.result_writer import ResultWriter
from .core.scorer import LexiconScorer, Scorer
from .models.results import AnalysisSummary, ScoredRecord, sentiment_label

__version__ = "1.0.0"

__all__ = [
    "AnalysisSummary",
    "FileReadError",
    "LexiconParser",
    "LexiconScorer",
    "OutputWriteError",
    "PathNotFoundError",
    "RecordLoader",
    "ResultWriter",
    "ScoredRecord",
    "Scorer",
    "SentimentAnalysisManager",
    "sentiment_label",
]
