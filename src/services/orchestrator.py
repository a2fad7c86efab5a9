"""Оркестратор команд генерации step definitions."""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from domain.enums import TestFramework
from domain.host import Host, InputPrompt, NotifyOptions
from domain.models import DEFAULT_CLASS_NAME, DEFAULT_PACKAGE_NAME, GenerationResult, GeneratorConfig
from infrastructure.settings_store import SettingsStore
from tools.code_formatter import DEFAULT_INDENT_SIZE
from tools.line_classifier import looks_like_feature_document
from tools.step_definition_generator import StepDefinitionGenerator

logger = logging.getLogger(__name__)


SERVICE_VERSION = "0.1.0"

SAMPLE_STEPS = (
    "Given I am on the homepage",
    "When I click on the login button",
    "Then I should see the login form",
)

CREATE_FILE = "Create File"
VIEW_OUTPUT = "View Output"
CONFIGURE = "Configure"

SETTINGS_KEYS = ("packageName", "className", "baseTestClass", "imports", "annotations", "framework")

QUICK_ACTIONS: tuple[dict[str, str], ...] = (
    {
        "action": "generate",
        "label": "Generate Step Definitions",
        "description": "Generate step definitions from current file or selection",
    },
    {
        "action": "createFile",
        "label": "Create Step Definition File",
        "description": "Create a new step definition file",
    },
    {
        "action": "configure",
        "label": "Configure Settings",
        "description": "Configure generation settings",
    },
    {
        "action": "about",
        "label": "About",
        "description": "View service information",
    },
)


class Orchestrator:
    """Фасад для HTTP-слоя: команды пользователя поверх ядра генерации.

    Ядро (``tools``) получает только строки и GeneratorConfig. Всё общение с
    пользователем идёт через переданный Host.
    """

    def __init__(
        self,
        settings_store: SettingsStore,
        defaults: GeneratorConfig | None = None,
        *,
        default_step_file_name: str = "StepDefinitions.java",
        indent_size: int = DEFAULT_INDENT_SIZE,
    ) -> None:
        self.settings_store = settings_store
        self.defaults = defaults or GeneratorConfig()
        self.default_step_file_name = default_step_file_name
        self.indent_size = indent_size

    def initialize_settings(self) -> dict[str, Any]:
        """Записывает пакет и имя класса по умолчанию, если их ещё нет."""

        return self.settings_store.initialize_defaults(
            {
                "packageName": self.defaults.package_name,
                "className": self.defaults.class_name,
            }
        )

    def current_config(self, overrides: Mapping[str, Any] | None = None) -> GeneratorConfig:
        """Снимок конфигурации: окружение, затем сохранённые настройки, затем overrides."""

        config = GeneratorConfig.from_mapping(self.settings_store.snapshot(), base=self.defaults)
        if overrides:
            config = GeneratorConfig.from_mapping(overrides, base=config)
        return config

    def update_settings(self, values: Mapping[str, Any]) -> GeneratorConfig:
        """Сохраняет известные ключи настроек и возвращает новую конфигурацию."""

        changes = {key: values[key] for key in SETTINGS_KEYS if values.get(key) is not None}
        if "framework" in changes:
            changes["framework"] = TestFramework(changes["framework"]).value
        for key in ("imports", "annotations"):
            if key in changes:
                changes[key] = [str(item) for item in changes[key]]
        if changes:
            self.settings_store.update_many(changes)
            logger.info("[Orchestrator] Настройки обновлены: %s", sorted(changes))
        return self.current_config()

    def generate_code(
        self, text: str | None, overrides: Mapping[str, Any] | None = None
    ) -> GenerationResult:
        config = self.current_config(overrides)
        generator = StepDefinitionGenerator(config, indent_size=self.indent_size)
        return generator.run_text(text)

    def generate_step_definitions(
        self,
        host: Host,
        *,
        selection_only: bool = False,
        overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Генерирует step definitions из документа или выделения и кладёт их в буфер."""

        document_text = host.get_active_text()
        selection = host.get_selection()
        if document_text is None and selection is None:
            host.notify(
                "No active document found. Please open a Cucumber feature file.",
                NotifyOptions(level="error"),
            )
            return _outcome("no_document")

        if not looks_like_feature_document(host.get_document_name(), document_text or selection):
            answer = host.notify(
                "This doesn't appear to be a Cucumber feature file. Continue anyway?",
                NotifyOptions(key="continueNonFeature", level="warning", choices=("Yes", "No")),
            )
            if answer != "Yes":
                logger.info("[Orchestrator] Генерация отменена: документ не похож на feature")
                return _outcome("cancelled")

        if selection_only or selection:
            text = (selection or "").strip()
            selected_lines = len(text.splitlines()) or 1
            selection_info = f" ({selected_lines} lines selected)"
        else:
            text = document_text or ""
            selection_info = " (entire file)"

        if not text.strip():
            host.notify("No content to process.", NotifyOptions(level="warning"))
            return _outcome("empty", selection_info=selection_info)

        result = self.generate_code(text, overrides)
        if not result.methods:
            host.notify(
                f"No valid Cucumber steps found{selection_info}. "
                "Make sure your steps start with Given, When, Then, And or But.",
                NotifyOptions(level="warning"),
            )
            return _outcome("no_steps", selection_info=selection_info)

        host.write_clipboard(result.code)
        logger.info(
            "[Orchestrator] Сгенерировано step definitions: %s%s", result.steps_count, selection_info
        )
        follow_up = host.notify(
            f"Generated {result.steps_count} step definition(s){selection_info} and copied to clipboard!",
            NotifyOptions(key="followUp", choices=(CREATE_FILE, VIEW_OUTPUT, CONFIGURE)),
        )

        file_status: dict[str, Any] | None = None
        if follow_up == CREATE_FILE:
            file_status = self.create_step_file(host, result.code)
        elif follow_up == VIEW_OUTPUT:
            host.show_preview(result.code, "java")
        elif follow_up == CONFIGURE:
            self.configure(host)

        return _outcome(
            "generated",
            selection_info=selection_info,
            result=result,
            follow_up=follow_up,
            file_status=file_status,
        )

    def default_file_content(self) -> str:
        return self.generate_code("\n".join(SAMPLE_STEPS)).code

    def create_step_file(self, host: Host, content: str | None = None) -> dict[str, Any]:
        """Создаёт файл step definitions в рабочем пространстве."""

        if content is None:
            content = self.default_file_content()

        file_name = host.prompt_input(
            InputPrompt(
                key="fileName",
                prompt="Enter file name",
                value=self.default_step_file_name,
                placeholder=self.default_step_file_name,
            )
        )
        if not file_name:
            return {"status": "cancelled", "targetPath": None, "message": None}

        logger.info("[Orchestrator] Создание файла step definitions %s", file_name)
        if not host.write_file(file_name, content):
            message = f"Failed to create file: {file_name}"
            host.notify(message, NotifyOptions(level="error"))
            return {"status": "failed", "targetPath": file_name, "message": message}

        host.notify(f"Step definition file created: {file_name}")
        return {"status": "created", "targetPath": file_name, "message": None}

    def configure(self, host: Host) -> dict[str, Any]:
        """Спрашивает пакет, класс и базовый класс и сохраняет их."""

        config = self.current_config()
        package_name = host.prompt_input(
            InputPrompt(
                key="packageName",
                prompt="Enter package name",
                value=config.package_name,
                placeholder=DEFAULT_PACKAGE_NAME,
            )
        )
        if package_name is None:
            return {"status": "cancelled", "config": config.to_mapping()}

        class_name = host.prompt_input(
            InputPrompt(
                key="className",
                prompt="Enter class name",
                value=config.class_name,
                placeholder=DEFAULT_CLASS_NAME,
            )
        )
        if class_name is None:
            return {"status": "cancelled", "config": config.to_mapping()}

        base_test_class = host.prompt_input(
            InputPrompt(
                key="baseTestClass",
                prompt="Enter base test class (optional)",
                value=config.base_test_class or "",
                placeholder="BaseTest",
            )
        )
        self.settings_store.update_many(
            {
                "packageName": package_name,
                "className": class_name,
                "baseTestClass": base_test_class or "",
            }
        )
        host.notify("Configuration updated successfully!")
        return {"status": "updated", "config": self.current_config().to_mapping()}

    def about(self) -> str:
        return "\n".join(
            [
                "Cucumber Step Definition Generator",
                "",
                f"Version: {SERVICE_VERSION}",
                "",
                "Features:",
                "- Generate step definitions from Cucumber steps",
                "- Support for parameterized steps",
                "- Configurable package and class names",
                "- Code formatting",
                "- Quick actions",
            ]
        )

    def quick_actions(self) -> list[dict[str, str]]:
        return [dict(item) for item in QUICK_ACTIONS]

    def run_quick_action(self, action: str, host: Host) -> dict[str, Any]:
        """Выполняет быструю команду по её идентификатору."""

        handlers: dict[str, Callable[[Host], dict[str, Any]]] = {
            "generate": lambda h: self.generate_step_definitions(h),
            "createFile": lambda h: self.create_step_file(h),
            "configure": self.configure,
            "about": self._show_about,
        }
        handler = handlers.get(action)
        if handler is None:
            raise ValueError(f"Unknown quick action: {action}")
        logger.info("[Orchestrator] Быстрая команда: %s", action)
        return handler(host)

    def _show_about(self, host: Host) -> dict[str, Any]:
        message = self.about()
        host.notify(message, NotifyOptions(modal=True))
        return {"status": "shown", "message": message}


def _outcome(
    status: str,
    *,
    selection_info: str | None = None,
    result: GenerationResult | None = None,
    follow_up: str | None = None,
    file_status: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return {
        "status": status,
        "selectionInfo": selection_info,
        "result": result,
        "followUp": follow_up,
        "fileStatus": file_status,
    }


__all__ = ["Orchestrator", "QUICK_ACTIONS", "SAMPLE_STEPS"]
