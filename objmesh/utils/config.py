"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
Config(None) живёт только в памяти и ничего не пишет на диск.
"""

import copy
import json
from pathlib import Path
from objmesh.utils.logger import logger

DEFAULT_CONFIG = {
    "loader": {
        "encoding": "utf-8",
        "strip_comments": True,
        "relative_indices": False,
        "verbose": False,
    },
    "processing": {
        "tessellate_quads": True,
        "compute_face_normals": True,
    },
    "export": {
        "smooth_lighting": True,
    },
    "log_level": "INFO",
}


def _merge(defaults: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(merged.get(key), dict):
            if isinstance(value, dict):
                merged[key] = _merge(merged[key], value)
            else:
                logger.error(f"[Config] Section '{key}' must be an object, "
                             f"got {type(value).__name__}; using defaults.")
        else:
            merged[key] = value
    return merged


class Config:
    """Настройки загрузки, обработки и экспорта."""

    def __init__(self, path="objmesh.json"):
        self.path = Path(path) if path is not None else None
        self._load()

    def _load(self):
        if self.path is None:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError(f"top level must be an object, "
                                     f"got {type(loaded).__name__}")
                self.data = _merge(DEFAULT_CONFIG, loaded)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        if self.path is None:
            return
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
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------------
    # keyword‑аргументы для ObjLoader / export_group
    # -----------------------------------------------------------------
    def _section(self, name) -> dict:
        section = self[name]
        return section if isinstance(section, dict) else DEFAULT_CONFIG[name]

    def loader_options(self) -> dict:
        known = DEFAULT_CONFIG["loader"]
        return {k: v for k, v in self._section("loader").items() if k in known}

    def processing_options(self) -> dict:
        return dict(self._section("processing"))

    @property
    def smooth_lighting(self) -> bool:
        return bool(self._section("export").get("smooth_lighting", True))
