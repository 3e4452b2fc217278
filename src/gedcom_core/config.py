import os
from pathlib import Path

import yaml

from gedcom_core.utils.pathing import resolve_project_path

CONFIG_PATH = resolve_project_path(Path("config") / "gedcom_core.yml")
CONFIG_ENV_VAR = "GEDCOM_CORE_CONFIG"

class GCConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.parser = data.get("parser", {})
        self.debug = data.get("debug", False)

def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH

def load_config(path=None) -> 'GCConfig':
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GCConfig(data)

_config_cache = None

def get_config() -> 'GCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
