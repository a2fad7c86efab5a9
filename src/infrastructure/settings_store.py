"""Persistent key-value storage for user-level generator settings."""
from __future__ import annotations

import json
import logging
from copy import deepcopy
from datetime import datetime, timezone
from pathlib import Path
from threading import RLock
from typing import Any, Mapping

logger = logging.getLogger(__name__)


SETTINGS_SECTION = "stepGen"


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class SettingsStore:
    """Opaque string-keyed settings store.

    Values live under one section of a JSON document. Without a path the store
    keeps everything in memory, which is what tests and ephemeral runs use.
    """

    def __init__(self, path: Path | None = None, *, section: str = SETTINGS_SECTION) -> None:
        self._path = Path(path) if path else None
        self._section = section
        self._lock = RLock()
        self._memory: dict[str, Any] = {}
        if self._path:
            self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path | None:
        return self._path

    def _load_document(self) -> dict[str, Any]:
        if not self._path:
            return {self._section: deepcopy(self._memory)}
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("[SettingsStore] Не удалось прочитать %s: %s", self._path, exc)
            return {}
        return payload if isinstance(payload, dict) else {}

    def _save_document(self, document: dict[str, Any]) -> None:
        if not self._path:
            self._memory = deepcopy(document.get(self._section, {}))
            return
        document["updatedAt"] = _utcnow()
        self._path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            section = self._load_document().get(self._section, {})
            return deepcopy(section) if isinstance(section, dict) else {}

    def update_many(self, values: Mapping[str, Any]) -> dict[str, Any]:
        with self._lock:
            document = self._load_document()
            section = document.get(self._section)
            if not isinstance(section, dict):
                section = {}
            section.update(values)
            document[self._section] = section
            self._save_document(document)
            return deepcopy(section)

    def initialize_defaults(self, defaults: Mapping[str, Any]) -> dict[str, Any]:
        """Writes defaults only for keys that are not stored yet."""

        with self._lock:
            current = self.snapshot()
            missing = {key: value for key, value in defaults.items() if key not in current}
            if not missing:
                return current
            logger.info("[SettingsStore] Инициализация настроек по умолчанию: %s", sorted(missing))
            return self.update_many(missing)


__all__ = ["SETTINGS_SECTION", "SettingsStore"]
