"""Loads tweet files: one tweet per line, in file order."""

from pathlib import Path
from typing import List, Optional

from ..utils.logger import get_logger
from .file_handler import FileHandler

logger = get_logger(__name__)


class RecordLoader:
    """Reads a single tweet file into an ordered list of raw tweet lines."""

    def __init__(self, file_handler: Optional[FileHandler] = None):
        self.file_handler = file_handler or FileHandler()

    def load(self, file_path: Path) -> List[str]:
        """
        Load every line of a tweet file, preserving order.

        Raises:
            FileReadError: If the file cannot be opened or read
        """
        tweets = self.file_handler.read_lines(Path(file_path))
        logger.debug(f"Loaded {len(tweets)} tweets from {file_path}")
        return tweets
