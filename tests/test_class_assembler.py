from __future__ import annotations

from domain.models import GeneratorConfig
from tools.class_assembler import DEFAULT_IMPORTS, ClassAssembler, merge_imports


def test_header_uses_package_class_and_default_imports() -> None:
    header = ClassAssembler().build_header(GeneratorConfig())

    assert header.startswith("package com.example.stepdefinitions;\n\nimport io.cucumber.java.en.Given;")
    for item in DEFAULT_IMPORTS:
        assert f"import {item};" in header
    assert "public class StepDefinitions {" in header
    assert "extends" not in header
    assert "    public StepDefinitions() {" in header


def test_header_with_base_class_and_extra_imports() -> None:
    config = GeneratorConfig(
        package_name="com.acme.steps",
        class_name="LoginSteps",
        base_test_class="BaseTest",
        imports=("com.acme.DriverManager", "org.testng.Assert"),
    )

    header = ClassAssembler().build_header(config)

    assert "package com.acme.steps;" in header
    assert "public class LoginSteps extends BaseTest {" in header
    assert header.count("import org.testng.Assert;") == 1
    assert header.index("import java.time.Duration;") < header.index("import com.acme.DriverManager;")


def test_empty_package_omits_package_line() -> None:
    header = ClassAssembler().build_header(GeneratorConfig(package_name=""))

    assert not header.startswith("package")
    assert header.startswith("import io.cucumber.java.en.Given;")


def test_merge_imports_keeps_order_and_removes_duplicates() -> None:
    merged = merge_imports(["a.B", "java.time.Duration", "a.B", "c.D"])

    assert merged == [*DEFAULT_IMPORTS, "a.B", "c.D"]


def test_assembled_class_without_methods() -> None:
    assembler = ClassAssembler()
    assembled = assembler.assemble(GeneratorConfig(), [])

    assert assembled.text == assembled.header + assembled.footer
    assert "findElementWithWait" in assembled.text
    assert "isElementDisplayed" in assembled.text
    assert assembled.text.endswith("}\n")
