"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден или повреждён – используются настройки по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from typing import Optional

from objmesh.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "loader": {
        "encoding": "utf-8",
        "strict": False,      # True → UnsupportedDirectiveError для g/usemtl/…
        "dedup": "scan",      # scan | hash
    },
    "log_level": "INFO",
}


class Config:
    """Настройки загрузчика; отсутствующие ключи берутся из DEFAULT_CONFIG."""

    def __init__(self, path: Optional[str] = None, data: Optional[dict] = None):
        self.path = Path(path) if path is not None else None
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if data is not None:
            self._merge(data)
        elif self.path is not None:
            self._load()

    def _merge(self, data: dict):
        for key, value in data.items():
            current = self.data.get(key)
            if isinstance(current, dict):
                if not isinstance(value, dict):
                    logger.error(f"[Config] Section {key!r} must be an object, ignoring {value!r}")
                    continue
                current.update(value)
            else:
                self.data[key] = value

    def _load(self):
        if not self.path.is_file():
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] Expected a JSON object in {self.path}")
            return
        self._merge(loaded)
        logger.info("[Config] Loaded configuration.")

    def save(self, path: Optional[str] = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Config.save() needs a path")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info(f"[Config] Configuration saved to {target}.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)

    def apply_log_level(self):
        set_level(self["log_level"])

    # -----------------------------------------------------------------
    # loader‑секция
    # -----------------------------------------------------------------
    @property
    def encoding(self) -> str:
        return self["loader"].get("encoding", "utf-8")

    @property
    def strict(self) -> bool:
        value = self["loader"].get("strict", False)
        if not isinstance(value, bool):
            logger.error(f"[Config] loader.strict must be true/false, got {value!r}")
            return False
        return value

    @property
    def dedup(self) -> str:
        return self["loader"].get("dedup", "scan")
