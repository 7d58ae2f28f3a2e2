"""
Bounded per-file worker pool used for directory fan-out.

Both the lexicon builder and the tweet scorer process a directory by running
one task per file on a thread pool. This module owns that loop: it sizes the
pool, waits for every task, turns per-file I/O failures into
``ProcessingError`` records, and cancels outstanding work if the caller is
interrupted.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from ..config.settings import DEFAULT_MAX_WORKERS, PROGRESS_LOG_INTERVAL
from ..models.results import ProcessingError
from ..utils.logger import get_logger, log_error

logger = get_logger(__name__)

# Failures that only cost one file's contribution
RECOVERABLE_ERRORS = (OSError, ValueError)


@dataclass
class FileTaskResult:
    """Outcome of one per-file task: either a value or an error."""
    path: Path
    value: Any = None
    error: Optional[ProcessingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def resolve_workers(max_workers: Optional[int], file_count: int) -> int:
    """Pool size: requested (or default) workers, never more than the file count."""
    if max_workers is None:
        max_workers = DEFAULT_MAX_WORKERS
    return max(1, min(max_workers, file_count))


def run_file_tasks(file_paths: Sequence[Path],
                   task: Callable[[Path], Any],
                   max_workers: Optional[int] = None,
                   description: str = "files") -> List[FileTaskResult]:
    """
    Run ``task`` once per file on a bounded thread pool and wait for all.

    A task that raises a recoverable error (``OSError``/``ValueError``) is
    logged and reported as a failed ``FileTaskResult``; its siblings keep
    running. Any other exception, or an interrupt while waiting, cancels
    the tasks that have not started yet and propagates to the caller.

    Args:
        file_paths: Files to process
        task: Callable invoked with each path
        max_workers: Upper bound on worker threads
        description: Noun used in progress log messages

    Returns:
        One FileTaskResult per file, in completion order
    """
    total = len(file_paths)
    if total == 0:
        return []

    workers = resolve_workers(max_workers, total)
    logger.info(f"Processing {total} {description} using {workers} workers")

    results: List[FileTaskResult] = []
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="tweet-sentiment")

    try:
        futures = {executor.submit(task, path): path for path in file_paths}

        for i, future in enumerate(as_completed(futures), 1):
            path = futures[future]
            try:
                results.append(FileTaskResult(path=path, value=future.result()))
            except RECOVERABLE_ERRORS as e:
                error = ProcessingError(
                    file_path=path,
                    error_type="FileReadFailure",
                    error_message=str(e),
                )
                log_error(logger, error)
                results.append(FileTaskResult(path=path, error=error))

            # Log progress every N files or at completion
            if i % PROGRESS_LOG_INTERVAL == 0 or i == total:
                logger.info(f"Progress: {i}/{total} {description} processed ({i / total * 100:.1f}%)")

    except BaseException:
        logger.error(f"Processing of {description} interrupted; cancelling pending tasks")
        executor.shutdown(wait=False, cancel_futures=True)
        raise

    executor.shutdown(wait=True)
    return results
