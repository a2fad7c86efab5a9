"""Сервисный слой и фабрики для работы с генератором step definitions."""
from __future__ import annotations

import logging
from typing import Any

from app.config import Settings, get_settings
from domain.models import ParsedStep, RenderedMethod, StepParameter
from infrastructure.settings_store import SettingsStore

logger = logging.getLogger(__name__)


def _serialize_parameter(parameter: StepParameter) -> dict[str, Any]:
    return {
        "kind": parameter.kind.value,
        "typeName": parameter.type_name,
        "name": parameter.name,
        "value": parameter.value,
        "declaration": parameter.declaration,
    }


def _serialize_parsed_step(step: ParsedStep, method: RenderedMethod | None = None) -> dict[str, Any]:
    return {
        "originalStep": step.original_step,
        "keyword": step.category.value,
        "stepText": step.step_text,
        "parameters": [_serialize_parameter(parameter) for parameter in step.parameters],
        "methodName": method.method_name if method else step.method_name,
        "matchPattern": step.match_pattern,
        "annotation": f'@{step.category.value}("{step.anchored_pattern}")',
    }


def create_orchestrator(settings: Settings | None = None):
    """Создаёт оркестратор со всеми зависимостями."""

    from services.orchestrator import Orchestrator

    resolved_settings = settings or get_settings()
    settings_store = SettingsStore(resolved_settings.settings_file)
    orchestrator = Orchestrator(
        settings_store,
        resolved_settings.generator_defaults(),
        default_step_file_name=resolved_settings.default_step_file_name,
        indent_size=resolved_settings.indent_size,
    )
    logger.debug(
        "Хранилище настроек инициализировано: %s", settings_store.path or "in-memory"
    )
    return orchestrator


__all__ = ["create_orchestrator", "_serialize_parameter", "_serialize_parsed_step"]
