from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import click

from text_frequency.frequency import count_frequencies, rank
from text_frequency.normalizer import normalize
from text_frequency.reader import read_text
from text_frequency.types import RankedEntry, ReportInfo

LOGGER = logging.getLogger(__name__)

OUTPUT_FORMATS = ("human", "json")


@dataclass(frozen=True)
class AnalysisOptions:
    """Knobs for a single analysis run."""

    top: int = 10
    output_format: str = "human"  # "human" or "json"
    color: bool = True


@dataclass(frozen=True)
class Report:
    file: Path
    top: int
    total_row_characters: int
    total_words: int
    total_letters: int
    total_unique_words: int
    total_unique_letters: int
    words: List[RankedEntry] = field(default_factory=list)
    letters: List[RankedEntry] = field(default_factory=list)

    def info(self) -> ReportInfo:
        return {
            "file": str(self.file),
            "top": self.top,
            "total_row_characters": self.total_row_characters,
            "total_words": self.total_words,
            "total_letters": self.total_letters,
            "total_unique_words": self.total_unique_words,
            "total_unique_letters": self.total_unique_letters,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "report": {
                "info": self.info(),
                "words": list(self.words),
                "letters": list(self.letters),
            }
        }


def build_report(file: Path, contents: str, top: int) -> Report:
    """Normalize ``contents`` and rank its words and letters."""

    canonical = normalize(contents)
    counts = count_frequencies(canonical)
    report = Report(
        file=file,
        top=top,
        total_row_characters=len(contents),
        total_words=counts.total_words,
        total_letters=counts.total_letters,
        total_unique_words=len(counts.words),
        total_unique_letters=len(counts.letters),
        words=rank(counts.words, top, counts.total_words),
        letters=rank(counts.letters, top, counts.total_letters),
    )
    LOGGER.info(
        "Built report for %s: %d words, %d unique",
        file,
        report.total_words,
        report.total_unique_words,
    )
    return report


def analyze_file(path: Path, *, top: int = 10, encoding: str = "utf-8") -> Report:
    """Read ``path`` and build its report."""

    contents = read_text(path, encoding=encoding)
    return build_report(path, contents, top)


def _heading(text: str, color: bool) -> str:
    line = f"--- {text} ---"
    if not color:
        return line
    return click.style(line, fg="cyan", bold=True)


def _entry_lines(entries: List[RankedEntry]) -> List[str]:
    return [
        f"{index}. {entry['value']}: {entry['count']} ({entry['percentage']:.2f}%)"
        for index, entry in enumerate(entries, start=1)
    ]


def render_text(report: Report, *, color: bool = False) -> str:
    lines = [
        _heading("Text Analysis Report", color),
        "",
        f"Input File: {report.file}",
        f"Total Row Characters: {report.total_row_characters}",
        f"Total Words: {report.total_words}",
        f"Total Letters: {report.total_letters}",
        f"Total Unique Words: {report.total_unique_words}",
        f"Total Unique Letters: {report.total_unique_letters}",
        "",
        _heading(f"Words (Top: {report.top})", color),
        *_entry_lines(report.words),
        "",
        _heading(f"Letters (Top: {report.top})", color),
        *_entry_lines(report.letters),
        "",
        _heading("Report End", color),
    ]
    return "\n".join(lines)


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), ensure_ascii=False)


def render(report: Report, options: AnalysisOptions) -> str:
    if options.output_format == "human":
        return render_text(report, color=options.color)
    if options.output_format == "json":
        return render_json(report)
    raise ValueError(f"Unknown output_format '{options.output_format}'. Expected 'human' or 'json'.")
