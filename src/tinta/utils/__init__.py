"""Utility modules for Tinta.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from tinta.utils.hashing import hash_str
from tinta.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
