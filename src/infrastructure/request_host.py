"""Host, собранный из данных одного HTTP-запроса.

Клиент (плагин редактора) присылает текст документа, выделение и заранее
заполненные ответы на вопросы. Всё, что в редакторе было бы побочным
эффектом (буфер обмена, уведомления, предпросмотр), здесь записывается и
возвращается клиенту в ответе.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from domain.host import Host, InputPrompt, NotifyOptions
from infrastructure.fs_repo import FsRepository, WorkspaceError

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    """Уведомление, показанное пользователю в ходе выполнения команды."""

    message: str
    level: str = "info"
    choices: list[str] = field(default_factory=list)
    selected: str | None = None


@dataclass
class WrittenFile:
    path: str
    success: bool
    error: str | None = None


class RequestHost(Host):
    """Реализация Host поверх payload запроса.

    Ответы на запросы ввода берутся из ``answers`` по ключу запроса:
    отсутствующий ключ означает согласие со значением по умолчанию,
    явный ``None`` означает отмену.
    """

    def __init__(
        self,
        *,
        document_text: str | None = None,
        selection_text: str | None = None,
        document_name: str | None = None,
        fs_repo: FsRepository | None = None,
        answers: Mapping[str, Any] | None = None,
    ) -> None:
        self.document_text = document_text
        self.selection_text = selection_text
        self.document_name = document_name
        self.fs_repo = fs_repo
        self.answers: dict[str, Any] = dict(answers or {})
        self.clipboard: str | None = None
        self.preview: str | None = None
        self.preview_language: str | None = None
        self.notifications: list[Notification] = []
        self.written_files: list[WrittenFile] = []

    def get_active_text(self) -> str | None:
        return self.document_text

    def get_selection(self) -> str | None:
        return self.selection_text or None

    def get_document_name(self) -> str | None:
        return self.document_name

    def write_clipboard(self, text: str) -> bool:
        self.clipboard = text
        return True

    def write_file(self, path: str, text: str) -> bool:
        if not self.fs_repo:
            logger.warning("[RequestHost] Корень проекта не задан, файл %s не записан", path)
            self.written_files.append(WrittenFile(path=path, success=False, error="projectRoot is not set"))
            return False
        try:
            relative = self.fs_repo.write_text_file(path, text)
        except (OSError, WorkspaceError) as exc:
            logger.warning("[RequestHost] Не удалось записать файл %s: %s", path, exc)
            self.written_files.append(WrittenFile(path=path, success=False, error=str(exc)))
            return False
        logger.info("[RequestHost] Файл %s записан в %s", relative, self.fs_repo.get_root_path())
        self.written_files.append(WrittenFile(path=relative, success=True))
        return True

    def prompt_input(self, prompt: InputPrompt) -> str | None:
        if prompt.key not in self.answers:
            return prompt.value
        answer = self.answers[prompt.key]
        return None if answer is None else str(answer)

    def notify(self, message: str, options: NotifyOptions | None = None) -> str | None:
        options = options or NotifyOptions()
        selected = None
        if options.key and options.choices:
            answer = self.answers.get(options.key)
            selected = answer if answer in options.choices else None
        self.notifications.append(
            Notification(
                message=message,
                level=options.level,
                choices=list(options.choices),
                selected=selected,
            )
        )
        return selected

    def show_preview(self, content: str, language: str) -> None:
        self.preview = content
        self.preview_language = language


__all__ = ["Notification", "RequestHost", "WrittenFile"]
