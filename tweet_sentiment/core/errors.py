"""Exceptions raised for whole-stage failures of an analysis run."""


class PathNotFoundError(FileNotFoundError):
    """A lexicon or tweet root path does not exist."""


class FileReadError(OSError):
    """A single file could not be opened, decoded or read."""


class OutputWriteError(OSError):
    """The results file could not be written; nothing was left behind."""
