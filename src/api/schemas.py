"""Pydantic-схемы запросов и ответов для HTTP API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.enums import StepCategory, TestFramework


def _to_camel(value: str) -> str:
    """Преобразует snake_case в camelCase для JSON."""

    parts = value.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class ApiBaseModel(BaseModel):
    """Базовая модель для API со стилем camelCase и populate_by_name."""

    model_config = ConfigDict(
        alias_generator=_to_camel, populate_by_name=True, from_attributes=True
    )


class GeneratorConfigDto(ApiBaseModel):
    """Настройки генерации; в запросах все поля необязательны."""

    package_name: str | None = Field(default=None, description="Java-пакет класса")
    class_name: str | None = Field(default=None, description="Имя класса step definitions")
    base_test_class: str | None = Field(
        default=None, description="Базовый класс (extends); пустая строка отключает"
    )
    imports: list[str] | None = Field(
        default=None, description="Дополнительные импорты поверх стандартных"
    )
    annotations: list[str] | None = Field(
        default=None, description="Дополнительные аннотации (сохраняются, но не используются)"
    )
    framework: TestFramework | None = Field(
        default=None, description="Тег фреймворка: cucumber/testng/junit"
    )

    def to_overrides(self) -> dict[str, Any]:
        """Возвращает заданные поля в виде словаря с camelCase-ключами."""

        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class StepParameterDto(ApiBaseModel):
    """Параметр шага, извлечённый из текста."""

    kind: str = Field(..., description="Вид параметра: quoted/placeholder/number")
    type_name: str = Field(..., description="Java-тип параметра")
    name: str = Field(..., description="Имя параметра в сигнатуре")
    value: str = Field(..., description="Значение из исходного текста шага")
    declaration: str = Field(..., description="Объявление параметра для сигнатуры")


class ParsedStepDto(ApiBaseModel):
    """Разобранный шаг и сгенерированный для него метод."""

    original_step: str = Field(..., description="Исходная строка шага")
    keyword: StepCategory = Field(..., description="Категория шага: Given/When/Then")
    step_text: str = Field(..., description="Текст шага без ключевого слова")
    parameters: list[StepParameterDto] = Field(default_factory=list)
    method_name: str = Field(..., description="Уникальное имя метода")
    match_pattern: str = Field(..., description="Паттерн с группами захвата без якорей")
    annotation: str = Field(..., description="Строка аннотации метода")


class NotificationDto(ApiBaseModel):
    """Уведомление, которое клиент должен показать пользователю."""

    message: str
    level: str = "info"
    choices: list[str] = Field(default_factory=list)
    selected: str | None = None


class FileStatusDto(ApiBaseModel):
    """Результат записи файла step definitions."""

    status: str = Field(..., description="created/failed/cancelled")
    target_path: str | None = Field(default=None, description="Путь к файлу")
    message: str | None = Field(default=None, description="Дополнительное пояснение")


class HostRequest(ApiBaseModel):
    """Общая часть запросов, которые выполняются от имени редактора."""

    document_text: str | None = Field(default=None, description="Полный текст документа")
    selection_text: str | None = Field(default=None, description="Выделенный текст, если есть")
    document_name: str | None = Field(default=None, description="Имя файла документа")
    project_root: str | None = Field(
        default=None, description="Корень проекта для записи файлов"
    )
    answers: dict[str, str | None] = Field(
        default_factory=dict,
        description="Ответы на вопросы команды: ключ запроса -> значение (null = отмена)",
    )
    overrides: GeneratorConfigDto | None = Field(
        default=None,
        alias="config",
        description="Переопределения настроек только для этого запроса",
    )


class GenerateStepDefinitionsRequest(HostRequest):
    """Запрос на генерацию step definitions из документа или выделения."""

    selection_only: bool = Field(default=False, description="Обрабатывать только выделение")


class HostEffectsDto(ApiBaseModel):
    """Побочные эффекты команды, которые клиент применяет у себя."""

    clipboard_text: str | None = Field(default=None, description="Текст для буфера обмена")
    preview: str | None = Field(default=None, description="Текст для предпросмотра")
    notifications: list[NotificationDto] = Field(default_factory=list)


class GenerateStepDefinitionsResponse(HostEffectsDto):
    """Ответ с результатом генерации."""

    status: str = Field(..., description="generated/empty/no_steps/cancelled/no_document")
    code: str | None = Field(default=None, description="Сгенерированный Java-код")
    steps_count: int = Field(default=0, description="Количество сгенерированных методов")
    steps: list[ParsedStepDto] = Field(default_factory=list)
    skipped_lines: list[str] = Field(default_factory=list)
    selection_info: str | None = Field(default=None)
    follow_up: str | None = Field(default=None, description="Выбранное продолжение")
    file_status: FileStatusDto | None = Field(default=None)


class RenderStepDefinitionsRequest(ApiBaseModel):
    """Запрос на чистую генерацию кода по строкам шагов."""

    steps: list[str] | None = Field(default=None, description="Строки шагов")
    text: str | None = Field(default=None, description="Текст, который будет разбит на строки")
    overrides: GeneratorConfigDto | None = Field(default=None, alias="config")


class RenderStepDefinitionsResponse(ApiBaseModel):
    code: str
    steps_count: int
    steps: list[ParsedStepDto] = Field(default_factory=list)
    skipped_lines: list[str] = Field(default_factory=list)


class CreateStepFileRequest(HostRequest):
    """Запрос на создание файла step definitions."""

    file_name: str | None = Field(default=None, description="Имя файла относительно projectRoot")
    content: str | None = Field(
        default=None, description="Содержимое файла; по умолчанию генерируется пример"
    )


class CreateStepFileResponse(HostEffectsDto):
    file_status: FileStatusDto


class QuickActionDto(ApiBaseModel):
    action: str
    label: str
    description: str


class QuickActionResponse(HostEffectsDto):
    action: str
    status: str
    payload: dict[str, Any] = Field(default_factory=dict)


class AboutResponse(ApiBaseModel):
    message: str


__all__ = [
    "AboutResponse",
    "ApiBaseModel",
    "CreateStepFileRequest",
    "CreateStepFileResponse",
    "FileStatusDto",
    "GenerateStepDefinitionsRequest",
    "GenerateStepDefinitionsResponse",
    "GeneratorConfigDto",
    "HostEffectsDto",
    "HostRequest",
    "NotificationDto",
    "ParsedStepDto",
    "QuickActionDto",
    "QuickActionResponse",
    "RenderStepDefinitionsRequest",
    "RenderStepDefinitionsResponse",
    "StepParameterDto",
]
