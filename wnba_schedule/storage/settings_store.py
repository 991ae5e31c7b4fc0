import json
from pathlib import Path
from typing import Any, Dict

from loguru import logger


class SettingsStore:
    """Named values persisted in a single JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (IOError, ValueError) as e:
            logger.error(f"Failed to read settings from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Settings file {self.path} does not hold an object, ignoring it")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved setting '{key}' to {self.path}")
