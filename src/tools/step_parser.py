"""Разбор строки шага Gherkin в структуру ParsedStep."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Union

from domain.enums import ParameterKind, StepKeyword
from domain.models import ParsedStep, StepParameter
from tools.method_naming import generate_method_name

logger = logging.getLogger(__name__)


_STEP_RE = re.compile(r"^(" + "|".join(StepKeyword.supported_keywords()) + r")\s+(.*)$")

_QUOTED_RE = re.compile(r'"([^"]*)"')
_PLACEHOLDER_RE = re.compile(r"<([^>]*)>")
_NUMBER_RE = re.compile(r"\b\d+\b", re.ASCII)
_REGEX_META_RE = re.compile(r"([\\.^$*+?{}\[\]|()])")

_NAME_PREFIXES = {
    ParameterKind.QUOTED: "param",
    ParameterKind.PLACEHOLDER: "arg",
    ParameterKind.NUMBER: "number",
}


@dataclass
class _Slot:
    kind: ParameterKind
    name: str
    value: str


_Segment = Union[str, _Slot]


class StepParser:
    """Превращает строку шага в ParsedStep.

    Параметры извлекаются в фиксированном порядке: строки в двойных кавычках,
    затем ``<плейсхолдеры>``, затем отдельно стоящие целые числа. Каждый проход
    работает с уже изменённым текстом, поэтому число внутри кавычек не станет
    отдельным параметром. Итоговый список параметров упорядочен по позиции в
    тексте шага, чтобы совпадать с порядком групп захвата в паттерне.
    """

    def parse(self, line: str) -> ParsedStep | None:
        match = _STEP_RE.match((line or "").strip())
        if not match:
            logger.debug("[StepParser] Строка не похожа на шаг: %r", line)
            return None

        keyword = StepKeyword.from_string(match.group(1))
        step_text = match.group(2)
        parameters, match_pattern = self.extract_parameters(step_text)
        return ParsedStep(
            original_step=line.strip(),
            category=keyword.category,
            step_text=step_text,
            parameters=tuple(parameters),
            method_name=generate_method_name(step_text),
            match_pattern=match_pattern,
        )

    def extract_parameters(self, step_text: str) -> tuple[list[StepParameter], str]:
        """Возвращает параметры шага и паттерн с группами захвата."""

        counters = {kind: 0 for kind in ParameterKind}

        def allocate(kind: ParameterKind, value: str, name: str = "") -> _Slot:
            counters[kind] += 1
            return _Slot(
                kind=kind,
                name=name or f"{_NAME_PREFIXES[kind]}{counters[kind]}",
                value=value,
            )

        segments: list[_Segment] = [step_text]
        segments = _extract(
            segments, _QUOTED_RE, lambda m: allocate(ParameterKind.QUOTED, m.group(1))
        )
        segments = _extract(
            segments,
            _PLACEHOLDER_RE,
            lambda m: allocate(ParameterKind.PLACEHOLDER, m.group(1), _placeholder_name(m.group(1))),
        )
        segments = _extract(
            segments, _NUMBER_RE, lambda m: allocate(ParameterKind.NUMBER, m.group(0))
        )

        parameters: list[StepParameter] = []
        pattern_parts: list[str] = []
        for segment in segments:
            if isinstance(segment, _Slot):
                parameters.append(
                    StepParameter(kind=segment.kind, name=segment.name, value=segment.value)
                )
                pattern_parts.append(segment.kind.capture)
            else:
                pattern_parts.append(_escape_literal(segment))

        return parameters, "".join(pattern_parts)


def _extract(
    segments: list[_Segment], pattern: re.Pattern[str], make_slot: Callable[[re.Match[str]], _Slot]
) -> list[_Segment]:
    """Заменяет совпадения в литеральных кусках текста на параметры.

    Уже извлечённые параметры не просматриваются, поэтому совпадение не может
    захватить их целиком или частично.
    """

    result: list[_Segment] = []
    for segment in segments:
        if isinstance(segment, _Slot):
            result.append(segment)
            continue
        last_end = 0
        for match in pattern.finditer(segment):
            result.append(segment[last_end : match.start()])
            result.append(make_slot(match))
            last_end = match.end()
        result.append(segment[last_end:])
    return result


def _placeholder_name(content: str) -> str:
    return re.sub(r"\s+", "_", content.strip()).lower()


def _escape_literal(text: str) -> str:
    """Экранирует метасимволы regex, не трогая кавычки и пробелы."""

    return _REGEX_META_RE.sub(r"\\\1", text)


def parse_step(line: str) -> ParsedStep | None:
    return StepParser().parse(line)


__all__ = ["StepParser", "parse_step"]
