"""
Configuration Settings for the Tweet Sentiment Analyzer
========================================================

This module contains all configurable settings for the lexicon ingestion
and tweet scoring pipeline. Settings are organized into logical groups:

File Reading Settings:
- Encoding preferences and file size limits

Concurrency Settings:
- Default worker pool size for directory fan-out
- Lexicon merge ordering

Output Settings:
- Output file name, result block delimiter, score precision

Logging Settings:
- Shared log format for console and file handlers

Command-line flags override the values used at run time; the constants
here are the defaults.
"""

import os

# =============================================================================
# FILE READING SETTINGS
# =============================================================================

# Encodings tried first when reading lexicon and tweet files
ENCODING_PREFERENCES = ["utf-8"]

# Used when neither the preferred encodings nor chardet can decode a file
# latin-1 maps every byte, so decoding never fails at this step
FALLBACK_ENCODING = "latin-1"

# Maximum file size to read (MB)
# Larger files are refused and reported as read failures
MAX_FILE_SIZE_MB = 250

# Field separator for "word,score" lexicon lines
LEXICON_SEPARATOR = ","

# =============================================================================
# CONCURRENCY SETTINGS
# =============================================================================

# Default number of worker threads for directory processing
# Use all CPUs except one; the pool never exceeds the number of files
DEFAULT_MAX_WORKERS = max(1, (os.cpu_count() or 1) - 1)

# Apply per-file lexicon results in sorted path order
# When True, the last file in sorted order wins duplicate words
DETERMINISTIC_LEXICON_MERGE = True

# Log progress every N files during directory processing
PROGRESS_LOG_INTERVAL = 10

# =============================================================================
# OUTPUT SETTINGS
# =============================================================================

# File name used when the output location is an existing directory
OUTPUT_FILENAME = "outputFile.txt"

# Line printed after every result block
RESULT_DELIMITER = "_" * 80

# Number of decimal places kept in sentiment scores
SCORE_DECIMALS = 1

# Encoding for the results file and summary CSV
OUTPUT_ENCODING = "utf-8"

# =============================================================================
# LOGGING SETTINGS
# =============================================================================

# Log message format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Date format for log timestamps
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Default level when no --log-level flag is given
DEFAULT_LOG_LEVEL = "INFO"
