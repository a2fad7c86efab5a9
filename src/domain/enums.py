"""Перечисления, описывающие основные типы доменной модели."""
from __future__ import annotations

from enum import Enum


class StepCategory(str, Enum):
    """Семантическая категория шага после нормализации синонимов."""

    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"


class StepKeyword(str, Enum):
    """Ключевые слова Gherkin/Cucumber для шагов сценария."""

    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"
    BUT = "But"

    @property
    def category(self) -> StepCategory:
        """Возвращает категорию шага.

        ``And`` и ``But`` всегда сводятся к ``Given``: контекст предыдущего шага
        сценария не отслеживается.
        """

        if self in (StepKeyword.AND, StepKeyword.BUT):
            return StepCategory.GIVEN
        return StepCategory(self.value)

    @classmethod
    def from_string(cls, keyword: str) -> "StepKeyword":
        """Преобразует строку с ключевым словом шага в перечисление.

        Сравнение чувствительно к регистру, как и в самом Gherkin.
        """

        normalized = keyword.strip()
        if not normalized:
            raise ValueError("Keyword cannot be empty")

        try:
            return cls(normalized)
        except ValueError as error:
            raise ValueError(f"Unsupported step keyword: {keyword}") from error

    @classmethod
    def supported_keywords(cls) -> list[str]:
        """Возвращает написания ключевых слов в порядке объявления."""

        return [keyword.value for keyword in cls]


class ParameterKind(str, Enum):
    """Вид параметра, извлечённого из текста шага."""

    QUOTED = "quoted"
    PLACEHOLDER = "placeholder"
    NUMBER = "number"

    @property
    def type_name(self) -> str:
        """Java-тип параметра в сигнатуре метода."""

        return "int" if self is ParameterKind.NUMBER else "String"

    @property
    def capture(self) -> str:
        """Группа захвата, подставляемая в паттерн вместо значения."""

        return {
            ParameterKind.QUOTED: '"(.*?)"',
            ParameterKind.PLACEHOLDER: "(.*)",
            ParameterKind.NUMBER: r"(\d+)",
        }[self]


class TestFramework(str, Enum):
    """Целевой тестовый фреймворк.

    Тег принимается и сохраняется в конфигурации, но генератор пока
    поддерживает единственный стиль вывода (Cucumber + Selenium + TestNG).
    """

    __test__ = False

    CUCUMBER = "cucumber"
    TESTNG = "testng"
    JUNIT = "junit"
