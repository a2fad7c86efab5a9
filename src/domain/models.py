"""Доменные модели для описания шагов и сгенерированного кода step definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .enums import ParameterKind, StepCategory, TestFramework


DEFAULT_PACKAGE_NAME = "com.example.stepdefinitions"
DEFAULT_CLASS_NAME = "StepDefinitions"


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация одного запуска генерации.

    Снимок настроек берётся в начале вызова и не изменяется ядром.
    """

    package_name: str = DEFAULT_PACKAGE_NAME
    class_name: str = DEFAULT_CLASS_NAME
    base_test_class: str | None = None
    imports: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()
    framework: TestFramework = TestFramework.CUCUMBER

    def __post_init__(self) -> None:
        # frozen dataclass: нормализуем через object.__setattr__
        object.__setattr__(self, "imports", tuple(self.imports or ()))
        object.__setattr__(self, "annotations", tuple(self.annotations or ()))
        if not isinstance(self.framework, TestFramework):
            object.__setattr__(self, "framework", TestFramework(str(self.framework)))
        object.__setattr__(self, "base_test_class", self.base_test_class or None)

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, Any], *, base: "GeneratorConfig | None" = None
    ) -> "GeneratorConfig":
        """Строит конфигурацию из словаря с camelCase-ключами поверх базовой."""

        base = base or cls()
        imports = values.get("imports")
        annotations = values.get("annotations")
        return cls(
            package_name=_pick(values, "packageName", base.package_name),
            class_name=_pick(values, "className", base.class_name),
            base_test_class=_pick(values, "baseTestClass", base.base_test_class),
            imports=tuple(imports) if imports is not None else base.imports,
            annotations=tuple(annotations) if annotations is not None else base.annotations,
            framework=values.get("framework") or base.framework,
        )

    def to_mapping(self) -> dict[str, Any]:
        """Сериализует конфигурацию в словарь с camelCase-ключами."""

        return {
            "packageName": self.package_name,
            "className": self.class_name,
            "baseTestClass": self.base_test_class or "",
            "imports": list(self.imports),
            "annotations": list(self.annotations),
            "framework": self.framework.value,
        }


def _pick(values: Mapping[str, Any], key: str, default: Any) -> Any:
    value = values.get(key)
    return default if value is None else value


@dataclass(frozen=True)
class StepParameter:
    """Параметр шага: объявление в сигнатуре и исходное значение из текста."""

    kind: ParameterKind
    name: str
    value: str

    @property
    def type_name(self) -> str:
        return self.kind.type_name

    @property
    def declaration(self) -> str:
        """Объявление параметра для сигнатуры метода (``String param1``)."""

        return f"{self.type_name} {self.name}"


@dataclass(frozen=True)
class ParsedStep:
    """Шаг сценария, разобранный в структуру для генерации кода."""

    original_step: str
    category: StepCategory
    step_text: str
    parameters: tuple[StepParameter, ...]
    method_name: str
    match_pattern: str

    @property
    def anchored_pattern(self) -> str:
        """Паттерн аннотации с якорями начала и конца строки."""

        return f"^{self.match_pattern}$"

    @property
    def parameter_declarations(self) -> list[str]:
        return [parameter.declaration for parameter in self.parameters]


@dataclass(frozen=True)
class RenderedMethod:
    """Готовый текст метода step definition."""

    step: ParsedStep
    method_name: str
    text: str


@dataclass(frozen=True)
class AssembledClass:
    """Класс step definitions: заголовок, методы и завершающая часть."""

    header: str
    methods: tuple[RenderedMethod, ...]
    footer: str

    @property
    def text(self) -> str:
        body = "\n\n".join(method.text for method in self.methods)
        if body:
            body += "\n\n"
        return f"{self.header}{body}{self.footer}"


@dataclass
class GenerationResult:
    """Результат одного прогона генерации."""

    code: str
    steps: list[ParsedStep] = field(default_factory=list)
    methods: list[RenderedMethod] = field(default_factory=list)
    skipped_lines: list[str] = field(default_factory=list)

    @property
    def steps_count(self) -> int:
        return len(self.methods)

    @property
    def method_names(self) -> list[str]:
        return [method.method_name for method in self.methods]
