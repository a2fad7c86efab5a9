"""Построение имён Java-методов по тексту шага."""
from __future__ import annotations

import re


DEFAULT_METHOD_NAME = "generatedStep"

_NON_IDENTIFIER_RE = re.compile(r"[^a-zA-Z0-9\s]")
_LEADING_DIGITS_RE = re.compile(r"^\d+")


def generate_method_name(step_text: str) -> str:
    """Преобразует текст шага в lowerCamelCase идентификатор.

    Остаются только латинские буквы и цифры; ведущие цифры отбрасываются.
    Если ничего не осталось, возвращается ``generatedStep``.
    """

    words = _NON_IDENTIFIER_RE.sub("", step_text or "").split()
    camel = "".join(
        word.lower() if index == 0 else word[:1].upper() + word[1:].lower()
        for index, word in enumerate(words)
    )
    return _LEADING_DIGITS_RE.sub("", camel) or DEFAULT_METHOD_NAME


class MethodNameRegistry:
    """Выдаёт уникальные имена методов в пределах одного пакета шагов."""

    def __init__(self) -> None:
        self._used: set[str] = set()
        self._next_suffix: dict[str, int] = {}

    def reserve(self, base_name: str) -> str:
        """Резервирует имя: ``name``, затем ``name1``, ``name2`` и т.д."""

        if base_name not in self._used:
            self._used.add(base_name)
            self._next_suffix.setdefault(base_name, 1)
            return base_name

        counter = self._next_suffix.get(base_name, 1)
        candidate = f"{base_name}{counter}"
        while candidate in self._used:
            counter += 1
            candidate = f"{base_name}{counter}"
        self._used.add(candidate)
        self._next_suffix[base_name] = counter + 1
        return candidate

    def __contains__(self, name: object) -> bool:
        return name in self._used
