"""
Настройки загрузчика в формате JSON.
Если путь не задан или файл не найден – используются настройки по‑умолчанию.
"""

import json
from pathlib import Path
from objmesh.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    "with_tangents": False,
    "skip_degenerate_uv": False,
    "log_level": None,   # None – не трогать уровень логгера
}


class LoaderConfig:
    """Опции `load_obj` (вычислять ли тангенты и т.п.)."""

    def __init__(self, path: str | Path | None = None, **overrides):
        self.path = Path(path) if path is not None else None
        self._load()
        self.data.update(overrides)
        self._apply_log_level()

    def _load(self):
        if self.path is None:
            self.data = DEFAULT_CONFIG.copy()
        elif self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
                self.data = {**DEFAULT_CONFIG, **loaded}
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            self.data = DEFAULT_CONFIG.copy()

    def _apply_log_level(self):
        level = self.data.get("log_level")
        if level is not None:
            set_log_level(level)

    def save(self, path: str | Path | None = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("[Config] No path to save configuration to")
        try:
            with target.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")
            raise

    # -----------------------------------------------------------------
    def _flag(self, key: str) -> bool:
        value = self[key]
        if not isinstance(value, bool):
            raise ValueError(f"[Config] {key!r} must be true or false, got {value!r}")
        return value

    @property
    def with_tangents(self) -> bool:
        return self._flag("with_tangents")

    @property
    def skip_degenerate_uv(self) -> bool:
        return self._flag("skip_degenerate_uv")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        if key == "log_level":
            self._apply_log_level()

    def get(self, key, default=None):
        return self.data.get(key, default)
