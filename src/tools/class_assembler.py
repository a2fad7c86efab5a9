"""Сборка класса step definitions: заголовок, методы и вспомогательные заглушки."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from domain.models import AssembledClass, GeneratorConfig, RenderedMethod

logger = logging.getLogger(__name__)


DEFAULT_IMPORTS: tuple[str, ...] = (
    "io.cucumber.java.en.Given",
    "io.cucumber.java.en.When",
    "io.cucumber.java.en.Then",
    "org.openqa.selenium.WebDriver",
    "org.openqa.selenium.WebElement",
    "org.openqa.selenium.By",
    "org.openqa.selenium.support.ui.Select",
    "org.openqa.selenium.support.ui.WebDriverWait",
    "org.testng.Assert",
    "java.time.Duration",
)


def merge_imports(extra_imports: Iterable[str]) -> list[str]:
    """Объединяет импорты по умолчанию с пользовательскими без дублей."""

    merged: dict[str, None] = dict.fromkeys(DEFAULT_IMPORTS)
    for item in extra_imports:
        merged.setdefault(item, None)
    return list(merged)


class ClassAssembler:
    """Оборачивает отрендеренные методы в Java-класс.

    Имена пакета, класса и базового класса не проверяются: некорректная
    конфигурация даёт некорректный, но полный текст.
    """

    def build_header(self, config: GeneratorConfig) -> str:
        lines: list[str] = []
        if config.package_name:
            lines.extend([f"package {config.package_name};", ""])

        lines.extend(f"import {item};" for item in merge_imports(config.imports))
        lines.append("")

        lines.extend(
            [
                "/**",
                " * Cucumber Step Definitions",
                " * Generated by step-definition-service",
                " * ",
                " * This class contains step definitions for Cucumber scenarios.",
                " * Each method represents a step that can be used in feature files.",
                " */",
            ]
        )
        extends = f" extends {config.base_test_class}" if config.base_test_class else ""
        lines.extend([f"public class {config.class_name}{extends} {{", ""])

        lines.extend(
            [
                "    private WebDriver driver;",
                "    private WebDriverWait wait;",
                "",
                f"    public {config.class_name}() {{",
                "        // Initialize WebDriver and WebDriverWait if needed",
                "        // this.driver = DriverManager.getDriver();",
                "        // this.wait = new WebDriverWait(driver, Duration.ofSeconds(10));",
                "    }",
                "",
            ]
        )
        return "\n".join(lines) + "\n"

    def build_footer(self) -> str:
        lines = [
            "    /**",
            "     * Helper method to find element with wait",
            "     */",
            "    private WebElement findElementWithWait(By locator) {",
            "        return wait.until(driver -> driver.findElement(locator));",
            "    }",
            "",
            "    /**",
            "     * Helper method to verify element is displayed",
            "     */",
            "    private boolean isElementDisplayed(By locator) {",
            "        try {",
            "            return driver.findElement(locator).isDisplayed();",
            "        } catch (Exception e) {",
            "            return false;",
            "        }",
            "    }",
            "}",
        ]
        return "\n".join(lines) + "\n"

    def assemble(self, config: GeneratorConfig, methods: Sequence[RenderedMethod]) -> AssembledClass:
        logger.debug(
            "[ClassAssembler] Сборка класса %s (методов: %s, framework=%s)",
            config.class_name,
            len(methods),
            config.framework.value,
        )
        return AssembledClass(
            header=self.build_header(config),
            methods=tuple(methods),
            footer=self.build_footer(),
        )


__all__ = ["ClassAssembler", "DEFAULT_IMPORTS", "merge_imports"]
