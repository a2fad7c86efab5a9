"""Эвристическое выравнивание отступов Java-кода по фигурным скобкам."""
from __future__ import annotations


DEFAULT_INDENT_SIZE = 4


def format_code(code: str, indent_size: int = DEFAULT_INDENT_SIZE) -> str:
    """Переставляет отступы строк по балансу фигурных скобок.

    Строка, начинающаяся с ``}``, уменьшает уровень до вывода, строка,
    заканчивающаяся ``{``, увеличивает его после. Скобки внутри строковых
    литералов и комментариев не отличаются от настоящих.
    """

    indent_level = 0
    formatted: list[str] = []
    for line in code.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            formatted.append("")
            continue

        if trimmed.startswith("}"):
            indent_level = max(0, indent_level - 1)

        formatted.append(" " * (indent_level * indent_size) + trimmed)

        if trimmed.endswith("{"):
            indent_level += 1

    return "\n".join(formatted)


__all__ = ["DEFAULT_INDENT_SIZE", "format_code"]
