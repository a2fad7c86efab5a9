"""Utilities for picking genuine Gherkin step lines out of raw document text."""
from __future__ import annotations

import re
from pathlib import PurePath
from typing import Iterable

from domain.enums import StepKeyword


_STEP_LINE_RE = re.compile(
    r"^(" + "|".join(StepKeyword.supported_keywords()) + r")\s+"
)
_CONJUNCTION_RE = re.compile(r"^(And|But)\s+")
_FEATURE_CONTENT_RE = re.compile(r"^\s*(Feature:|Scenario:|Given|When|Then|And)", re.MULTILINE)
_SKIPPED_PREFIXES = ("#", "Feature:", "Scenario:", "Background:", "Examples:", "|")


def split_lines(text: str | None) -> list[str]:
    prepared = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    return [line.strip() for line in prepared.split("\n")]


def is_step_line(line: str) -> bool:
    if not line or line.startswith(_SKIPPED_PREFIXES):
        return False
    return bool(_STEP_LINE_RE.match(line))


def normalize_step_line(line: str) -> str:
    """Rewrites a leading ``And``/``But`` to ``Given``.

    No scenario context is tracked, so a conjunction following ``When`` or
    ``Then`` is still treated as a precondition.
    """

    return _CONJUNCTION_RE.sub("Given ", line, count=1)


def classify_lines(lines: Iterable[str]) -> list[str]:
    """Returns normalized step lines in input order with duplicates removed."""

    steps: dict[str, None] = {}
    for raw_line in lines:
        line = (raw_line or "").strip()
        if not is_step_line(line):
            continue
        steps.setdefault(normalize_step_line(line), None)
    return list(steps)


def looks_like_feature_document(file_name: str | None, text: str | None) -> bool:
    if file_name and PurePath(file_name).name.lower().endswith(".feature"):
        return True
    return bool(_FEATURE_CONTENT_RE.search(text or ""))


__all__ = [
    "classify_lines",
    "is_step_line",
    "looks_like_feature_document",
    "normalize_step_line",
    "split_lines",
]
