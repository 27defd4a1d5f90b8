"""Limits, defaults and exit codes shared across the package."""

from __future__ import annotations

from enum import IntEnum

# Reader
READER_BUFFER_SIZE = 64 * 1024
READER_SLAB_SIZE = 128 * 1024

# Terminal
MAX_PATTERN_LENGTH = 1000
MAX_MULTI = 2**31 - 1

# Matcher
NUM_PARTITIONS_MULTIPLIER = 8
MAX_PARTITIONS = 32

# Capacity of each chunk
CHUNK_SIZE = 100

# Do not cache results of low selectivity queries
QUERY_CACHE_MAX = CHUNK_SIZE // 5

# Do not cache mergers with large lists
MERGER_CACHE_MAX = 100000

# History
DEFAULT_HISTORY_MAX = 1000

# Jump labels
DEFAULT_JUMP_LABELS = (
    "asdfghjklqwertyuiopzxcvbnm1234567890ASDFGHJKLQWERTYUIOPZXCVBNM"
    "`~;:,<.>/?'\"!@#$%^&*()[{]}-_=+"
)


class ExitCode(IntEnum):
    """Process exit statuses."""

    OK = 0
    NO_MATCH = 1
    ERROR = 2
    BECOME = 126
    INTERRUPT = 130