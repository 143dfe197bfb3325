"""Preference store — process-wide string key/value storage.

JsonFilePreferenceStore keeps a flat JSON object at
XDG_CONFIG_HOME/ui-board/prefs.json (override with UI_BOARD_PREFS).
MemoryPreferenceStore is the in-process variant used by tests and embedders.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    """String-keyed preference storage."""

    def has_key(self, key: str) -> bool: ...

    def get_string(self, key: str, default: str = "") -> str: ...

    def set_string(self, key: str, value: str) -> None: ...

    def delete_key(self, key: str) -> None: ...


def get_config_path() -> Path:
    """Return path to the preference file.

    UI_BOARD_PREFS wins; otherwise XDG_CONFIG_HOME (default ~/.config) / ui-board / prefs.json.
    """
    override = os.environ.get("UI_BOARD_PREFS")
    if override:
        return Path(override)
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "ui-board" / "prefs.json"


class MemoryPreferenceStore:
    """Dict-backed store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def has_key(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = str(value)

    def delete_key(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


class JsonFilePreferenceStore:
    """Flat JSON file of string values.

    Every read goes to disk so separate store instances see each other's
    writes. Non-string values in the file are ignored.
    """

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path is not None else get_config_path()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            logger.warning("Preference file %s is unreadable; treating as empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preference file %s is not a JSON object; treating as empty", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        """Atomic write: temp file in the same directory, then rename."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
            os.replace(tmp_path, self._path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def has_key(self, key: str) -> bool:
        return key in self._load()

    def get_string(self, key: str, default: str = "") -> str:
        return self._load().get(key, default)

    def set_string(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._save(data)

    def delete_key(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)
