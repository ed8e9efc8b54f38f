import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "guest_roster.yml"
CONFIG_ENV_VAR = "GUEST_ROSTER_CONFIG"


class GRConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.cache = data.get("cache", {}) or {}
        self.roster = data.get("roster", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def max_guests_per_room(self) -> int:
        return int(self.roster.get("max_guests_per_room", 5))

    @property
    def cache_dir(self) -> str:
        return str(self.cache.get("dir") or self.paths.get("cache_dir") or ".guest_cache")


def config_path() -> Path:
    override = os.getenv(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'GRConfig':
    path = config_path()
    if not path.exists():
        # Installed without the repo checkout: run on built-in defaults.
        return GRConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GRConfig(data)

_config_cache = None

def get_config() -> 'GRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
