"""Генерация класса Cucumber step definitions из строк шагов Gherkin."""
from __future__ import annotations

import logging
from typing import Sequence

from domain.models import GenerationResult, GeneratorConfig, ParsedStep, RenderedMethod
from tools.class_assembler import ClassAssembler
from tools.code_formatter import DEFAULT_INDENT_SIZE, format_code
from tools.line_classifier import classify_lines, split_lines
from tools.method_naming import MethodNameRegistry
from tools.step_parser import StepParser
from tools.template_renderer import StepTemplateRenderer

logger = logging.getLogger(__name__)


class StepDefinitionGenerator:
    """Пайплайн: классификация строк, разбор, рендеринг, сборка и форматирование.

    Экземпляр не хранит состояние между вызовами: реестр имён методов
    создаётся заново для каждого пакета шагов.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        indent_size: int = DEFAULT_INDENT_SIZE,
        parser: StepParser | None = None,
        renderer: StepTemplateRenderer | None = None,
        assembler: ClassAssembler | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.indent_size = indent_size
        self.parser = parser or StepParser()
        self.renderer = renderer or StepTemplateRenderer()
        self.assembler = assembler or ClassAssembler()

    def run(self, lines: Sequence[str]) -> GenerationResult:
        """Генерирует код и возвращает его вместе с промежуточными структурами."""

        step_lines = classify_lines(lines)
        registry = MethodNameRegistry()
        parsed_steps: list[ParsedStep] = []
        methods: list[RenderedMethod] = []
        skipped: list[str] = []

        for line in step_lines:
            parsed = self.parser.parse(line)
            if parsed is None:
                logger.warning("[Generator] Шаг пропущен, не удалось разобрать: %r", line)
                skipped.append(line)
                continue
            parsed_steps.append(parsed)
            methods.append(self.renderer.render(parsed, registry))

        assembled = self.assembler.assemble(self.config, methods)
        code = format_code(assembled.text, self.indent_size)
        logger.info(
            "[Generator] Сгенерировано методов: %s (строк на входе: %s, пропущено: %s)",
            len(methods),
            len(step_lines),
            len(skipped),
        )
        return GenerationResult(
            code=code,
            steps=parsed_steps,
            methods=methods,
            skipped_lines=skipped,
        )

    def run_text(self, text: str | None) -> GenerationResult:
        return self.run(split_lines(text))


def generate(steps: Sequence[str], config: GeneratorConfig | None = None) -> str:
    """Возвращает отформатированный текст класса step definitions.

    Пустой вход даёт класс только с заголовком и вспомогательными методами.
    """

    return StepDefinitionGenerator(config).run(steps).code


def generate_from_text(text: str | None, config: GeneratorConfig | None = None) -> str:
    return StepDefinitionGenerator(config).run_text(text).code


__all__ = ["StepDefinitionGenerator", "generate", "generate_from_text"]
