"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию (файл не создаётся).
"""

import copy
import json
from pathlib import Path
from simple_math.utils.logger import logger

DEFAULT_CONFIG = {
    "vector": {"epsilon": 1e-6},
    "matrix": {"legacy_flat_array": False},
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "simple_math.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить синглтон (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if not self.path.is_file():
            logger.debug("[Config] No config file – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error("[Config] Config root must be a JSON object – using defaults.")
            return
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(self.data.get(key), dict):
                self.data[key].update(value)
            else:
                self.data[key] = value
        logger.info("[Config] Loaded configuration.")

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------------
    # удобные геттеры для математики
    # -----------------------------------------------------------------
    @property
    def epsilon(self) -> float:
        section = self["vector"] or {}
        return float(section.get("epsilon", DEFAULT_CONFIG["vector"]["epsilon"]))

    @property
    def legacy_flat_array(self) -> bool:
        section = self["matrix"] or {}
        return bool(section.get("legacy_flat_array", False))
