"""Модуль конфигурации приложения."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.enums import TestFramework
from domain.models import DEFAULT_CLASS_NAME, DEFAULT_PACKAGE_NAME, GeneratorConfig


ROOT_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = ROOT_DIR / ".env"

# Загружаем переменные только если файл существует, чтобы избежать лишних предупреждений
if ENV_PATH.exists():
    load_dotenv(ENV_PATH, override=False)


class Settings(BaseSettings):
    """Основные настройки приложения."""

    model_config = SettingsConfigDict(
        env_prefix="STEPGEN_",
        env_file=ENV_PATH,
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="step-definition-service", description="Название сервиса")
    api_prefix: str = Field(default="/api/v1", description="Префикс для HTTP API")
    host: str = Field(default="127.0.0.1", description="Хост для запуска приложения")
    port: int = Field(default=8000, description="Порт для запуска приложения")
    log_level: str = Field(default="INFO", description="Уровень логирования")
    settings_file: Path | None = Field(
        default=ROOT_DIR / ".stepgen" / "settings.json",
        description="JSON-файл с пользовательскими настройками генератора",
    )
    workspace_root: str | None = Field(
        default=None,
        description="Корень проекта по умолчанию для записи файлов step definitions",
    )

    default_package_name: str = Field(
        default=DEFAULT_PACKAGE_NAME, description="Пакет Java по умолчанию"
    )
    default_class_name: str = Field(
        default=DEFAULT_CLASS_NAME, description="Имя класса step definitions по умолчанию"
    )
    default_base_test_class: str | None = Field(
        default=None, description="Базовый тестовый класс (extends), если нужен"
    )
    default_imports: list[str] = Field(
        default_factory=list, description="Дополнительные импорты поверх стандартных"
    )
    default_framework: TestFramework = Field(
        default=TestFramework.CUCUMBER,
        description="Тег целевого фреймворка (пока не влияет на стиль вывода)",
    )
    default_step_file_name: str = Field(
        default="StepDefinitions.java", description="Имя создаваемого файла по умолчанию"
    )
    indent_size: int = Field(default=4, description="Размер отступа в сгенерированном коде")

    @field_validator("indent_size")
    @classmethod
    def _validate_indent_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("indent_size must be >= 1")
        return value

    def generator_defaults(self) -> GeneratorConfig:
        """Конфигурация генератора, заданная окружением."""

        return GeneratorConfig(
            package_name=self.default_package_name,
            class_name=self.default_class_name,
            base_test_class=self.default_base_test_class,
            imports=tuple(self.default_imports),
            framework=self.default_framework,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Получить настройки приложения с кешированием."""

    settings = Settings()
    logging.getLogger(__name__).debug("Config loaded: %s", settings.model_dump())
    return settings
