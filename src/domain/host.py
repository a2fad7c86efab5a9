"""Граница между ядром генерации и окружением пользователя.

Host описывает возможности редактора или другого клиента: доступ к тексту
документа и выделению, буфер обмена, запись файлов, запрос ввода и показ
уведомлений. Ядро генерации (пакет ``tools``) с этим интерфейсом не работает:
оно получает строки и конфигурацию и возвращает строку. Host используют только
команды оркестратора.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InputPrompt:
    """Описание запроса ввода у пользователя."""

    key: str
    prompt: str
    value: str | None = None
    placeholder: str | None = None


@dataclass(frozen=True)
class NotifyOptions:
    """Параметры уведомления: уровень и варианты ответа."""

    key: str | None = None
    level: str = "info"
    choices: tuple[str, ...] = field(default_factory=tuple)
    modal: bool = False


class Host:
    """Базовый интерфейс окружения, в котором выполняются команды."""

    def get_active_text(self) -> str | None:
        """Возвращает полный текст активного документа или None."""

        raise NotImplementedError

    def get_selection(self) -> str | None:
        """Возвращает выделенный текст или None, если выделения нет."""

        raise NotImplementedError

    def get_document_name(self) -> str | None:
        """Возвращает имя активного документа, если оно известно."""

        raise NotImplementedError

    def write_clipboard(self, text: str) -> bool:
        raise NotImplementedError

    def write_file(self, path: str, text: str) -> bool:
        """Записывает файл в рабочее пространство, возвращает признак успеха."""

        raise NotImplementedError

    def prompt_input(self, prompt: InputPrompt) -> str | None:
        """Запрашивает строку у пользователя; None означает отмену."""

        raise NotImplementedError

    def notify(self, message: str, options: NotifyOptions | None = None) -> str | None:
        """Показывает уведомление и возвращает выбранный вариант, если он есть."""

        raise NotImplementedError

    def show_preview(self, content: str, language: str) -> None:
        raise NotImplementedError


__all__ = ["Host", "InputPrompt", "NotifyOptions"]
