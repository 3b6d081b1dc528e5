"""
Settings loading for the recent-posts chain.

Precedence: overrides (CLI) > environment > run-config file > defaults.
"""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from postfetch.config import FetchConfig


DEFAULT_USERNAME = "tc11assb"

ENV_VARS = {
    "enabled": "INSTAGRAM_ENABLED",
    "username": "INSTAGRAM_USERNAME",
    "access_token": "INSTAGRAM_ACCESS_TOKEN",
    "account_id": "INSTAGRAM_ACCOUNT_ID",
    "exclude": "INSTAGRAM_EXCLUDE",
    "snapshot_path": "INSTAGRAM_SNAPSHOT_PATH",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class PostsSettings:
    """Account and behavior settings consumed by the chain."""
    enabled: bool = True
    username: str = DEFAULT_USERNAME
    access_token: str | None = None
    account_id: str | None = None
    exclude: str | None = None  # comma-separated shortcodes and/or post URLs
    snapshot_path: str | None = None  # None = bundled snapshot

    @property
    def has_graph_api_credentials(self) -> bool:
        return bool(
            self.access_token and self.access_token.strip()
            and self.account_id and self.account_id.strip()
        )


def parse_bool(value) -> bool:
    """Parse '1/true/yes/on' and '0/false/no/off' (case-insensitive)."""
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def load_run_config(path: str | Path) -> dict:
    """Load a run configuration from JSON or YAML."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Run config not found: {path}")

    # Handle empty files (e.g., /dev/null) gracefully
    content = p.read_text(encoding="utf-8").strip()
    if not content:
        return {}

    if p.suffix.lower() in (".yaml", ".yml"):
        result = yaml.safe_load(content)
    else:
        result = json.loads(content)

    if not result:
        return {}
    if not isinstance(result, dict):
        raise ValueError(f"Run config must be a mapping: {path}")
    return result


def _settings_section(cfg: dict) -> dict:
    section = cfg.get("instagram")
    if isinstance(section, dict):
        return section
    return cfg


def _coerce(name: str, value):
    if name == "enabled":
        return parse_bool(value)
    if value is None:
        return None
    return str(value)


def settings_from_env(env: dict | None = None) -> dict:
    """Collect settings present in the environment."""
    if env is None:
        env = os.environ
    values = {}
    for name, var in ENV_VARS.items():
        if var in env:
            values[name] = env[var]
    return values


def load_settings(
    path: str | Path | None = None,
    env: dict | None = None,
    overrides: dict | None = None,
) -> PostsSettings:
    """
    Build PostsSettings from config layers.

    Args:
        path: Optional YAML/JSON run config
        env: Environment mapping (defaults to os.environ)
        overrides: Highest-precedence values; None entries are ignored

    Returns:
        PostsSettings
    """
    known = {f.name for f in fields(PostsSettings)}
    merged = {}

    if path:
        section = _settings_section(load_run_config(path))
        merged.update({k: v for k, v in section.items() if k in known})

    merged.update(settings_from_env(env))

    if overrides:
        merged.update({k: v for k, v in overrides.items() if k in known and v is not None})

    return PostsSettings(**{k: _coerce(k, v) for k, v in merged.items()})


def load_fetch_config(path: str | Path | None = None) -> FetchConfig:
    """Build FetchConfig, applying a ``fetch:`` mapping from the run config."""
    if not path:
        return FetchConfig()
    cfg = load_run_config(path)
    spec = cfg.get("fetch")
    if not isinstance(spec, dict):
        return FetchConfig()
    known = {f.name for f in fields(FetchConfig)}
    return FetchConfig(**{k: v for k, v in spec.items() if k in known})
