"""Commit normalization and diff parsing."""

from .classifier import build_file_change, classify_change
from .diff_parser import DiffParser
from .normalizer import CommitNormalizer, calculate_stats, normalize_author

__all__ = [
    "CommitNormalizer",
    "DiffParser",
    "build_file_change",
    "calculate_stats",
    "classify_change",
    "normalize_author",
]
