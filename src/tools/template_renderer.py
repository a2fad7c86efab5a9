"""Рендеринг заготовки метода step definition по разобранному шагу."""
from __future__ import annotations

from typing import Callable

from domain.enums import StepCategory
from domain.models import ParsedStep, RenderedMethod
from tools.method_naming import MethodNameRegistry


_BODY_INDENT = " " * 12


def _given_hints(lowered: str) -> list[str]:
    lines = ["// Setup/precondition logic"]
    if "navigate" in lowered or "open" in lowered:
        lines.append('// driver.get("URL");')
    elif "login" in lowered or "user" in lowered:
        lines.append("// Perform login or user setup")
    else:
        lines.append("// Setup test data or initial state")
    return lines


def _when_hints(lowered: str) -> list[str]:
    lines = ["// Action/interaction logic"]
    if "click" in lowered:
        lines.append('// WebElement element = driver.findElement(By.id("elementId"));')
        lines.append("// element.click();")
    elif "enter" in lowered or "input" in lowered:
        lines.append('// WebElement inputField = driver.findElement(By.id("inputId"));')
        lines.append('// inputField.sendKeys("value");')
    elif "select" in lowered:
        lines.append('// Select dropdown = new Select(driver.findElement(By.id("selectId")));')
        lines.append('// dropdown.selectByVisibleText("optionText");')
    else:
        lines.append("// Perform the main action")
    return lines


def _then_hints(lowered: str) -> list[str]:
    lines = ["// Verification/assertion logic"]
    if "should see" in lowered or "displayed" in lowered:
        lines.append('// WebElement element = driver.findElement(By.id("elementId"));')
        lines.append('// Assert.assertTrue("Element should be displayed", element.isDisplayed());')
    elif "text" in lowered or "contains" in lowered:
        lines.append('// String actualText = driver.findElement(By.id("elementId")).getText();')
        lines.append(
            '// Assert.assertTrue("Text verification failed", actualText.contains("expectedText"));'
        )
    else:
        lines.append("// Verify the expected outcome")
    return lines


HINT_BUILDERS: dict[StepCategory, Callable[[str], list[str]]] = {
    StepCategory.GIVEN: _given_hints,
    StepCategory.WHEN: _when_hints,
    StepCategory.THEN: _then_hints,
}


def build_hints(category: StepCategory, step_text: str) -> list[str]:
    """Подбирает закомментированные подсказки Selenium по категории и тексту шага."""

    return HINT_BUILDERS[category](step_text.lower())


def java_string_literal(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class StepTemplateRenderer:
    """Собирает текст метода: javadoc, аннотацию, сигнатуру и тело-заглушку."""

    def render(self, step: ParsedStep, registry: MethodNameRegistry) -> RenderedMethod:
        method_name = registry.reserve(step.method_name)
        declarations = step.parameter_declarations

        lines = ["    /**", f"     * Step: {step.original_step}"]
        if declarations:
            lines.append(f"     * Parameters: {len(declarations)}")
        lines.append("     */")
        lines.append(f'    @{step.category.value}("{step.anchored_pattern}")')
        lines.append(f"    public void {method_name}({', '.join(declarations)}) {{")
        lines.append("        try {")

        body = [f"// TODO: Implement step logic for: {step.step_text}"]
        if declarations:
            body.append("// Available parameters:")
            body.extend(f"//   {declaration}" for declaration in declarations)
        body.extend(build_hints(step.category, step.step_text))
        body.extend(
            [
                "",
                "// Add assertions for verification",
                '// Assert.assertTrue("Step verification failed", condition);',
                "",
            ]
        )
        lines.extend(f"{_BODY_INDENT}{line}" if line else "" for line in body)

        failure_message = java_string_literal(f"Failed to execute step: {step.step_text}")
        lines.append("        } catch (Exception e) {")
        lines.append(f"            throw new RuntimeException({failure_message}, e);")
        lines.append("        }")
        lines.append("    }")

        return RenderedMethod(step=step, method_name=method_name, text="\n".join(lines))


__all__ = ["HINT_BUILDERS", "StepTemplateRenderer", "build_hints", "java_string_literal"]
