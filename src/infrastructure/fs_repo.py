"""Абстракция работы с файловой системой рабочего пространства.

FsRepository предоставляет единый интерфейс для записи сгенерированных файлов
step definitions независимо от конкретной IDE или ОС. Все пути задаются
относительно корня проекта; выход за пределы корня запрещён.
"""

from __future__ import annotations

from pathlib import Path


class WorkspaceError(ValueError):
    """Путь указывает за пределы рабочего пространства."""


class FsRepository:
    """Работа с файловой системой проекта пользователя."""

    def __init__(self, root_path: str) -> None:
        self._root = Path(root_path).resolve()

    def get_root_path(self) -> str:
        """Возвращает абсолютный путь к корню проекта."""

        return str(self._root)

    def resolve(self, relative_path: str) -> Path:
        """Возвращает абсолютный путь внутри корня проекта.

        Raises:
            WorkspaceError: если путь пустой или выходит за пределы корня.
        """

        normalized = (relative_path or "").strip().lstrip("/\\")
        if not normalized:
            raise WorkspaceError("Путь к файлу не задан")
        file_path = (self._root / normalized).resolve()
        if file_path != self._root and self._root not in file_path.parents:
            raise WorkspaceError(f"Путь {relative_path} выходит за пределы {self._root}")
        return file_path

    def write_text_file(self, relative_path: str, content: str, create_dirs: bool = True) -> str:
        """Записывает текстовый файл и возвращает его путь относительно корня."""

        file_path = self.resolve(relative_path)
        if create_dirs:
            file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path.relative_to(self._root).as_posix()
