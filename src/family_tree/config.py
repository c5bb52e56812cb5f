import copy
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "family_tree.yml"

DEFAULTS = {
    "debug": False,
    "paths": {"data_dir": "data", "logs_dir": "logs"},
    "loader": {"encoding": "utf-8"},
    "render": {"indent": "  "},
    "query": {"default_names": ["Bilbo", "Frodo"]},
    "logging": {
        "level": "INFO",
        "file": "family_tree.log",
        "console": "CRITICAL",
        "rotate": False,
    },
}


class FTConfig:
    def __init__(self, data):
        merged = copy.deepcopy(DEFAULTS)
        for key, value in data.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key].update(value)
            else:
                merged[key] = value

        self.paths = merged["paths"]
        self.loader = merged["loader"]
        self.render = merged["render"]
        self.query = merged["query"]
        self.logging = merged["logging"]
        self.debug = bool(merged["debug"])

    @property
    def default_names(self) -> tuple:
        names = list(self.query.get("default_names") or [])
        if len(names) != 2:
            raise ValueError(
                f"query.default_names must list exactly two names, got {names!r}"
            )
        return names[0], names[1]


def load_config(path: Path = CONFIG_PATH) -> 'FTConfig':
    # Installed copies may not ship the YAML; fall back to the built-in defaults.
    if not path.exists():
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
