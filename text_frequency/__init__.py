"""Word and letter frequency reports for text files."""

from .frequency import FrequencyCounts, count_frequencies, rank
from .normalizer import normalize
from .reader import (
    PathIsDirectoryError,
    PathNotFoundError,
    ReadFailureError,
    TextFrequencyError,
    read_text,
)
from .report import AnalysisOptions, Report, analyze_file, build_report, render
from .types import RankedEntry

__all__ = [
    "normalize",
    "count_frequencies",
    "rank",
    "build_report",
    "analyze_file",
    "render",
    "read_text",
    "AnalysisOptions",
    "FrequencyCounts",
    "RankedEntry",
    "Report",
    "TextFrequencyError",
    "PathIsDirectoryError",
    "PathNotFoundError",
    "ReadFailureError",
]
