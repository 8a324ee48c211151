"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from faqrender.core.models import AppConfig, ContentFormat, ServerConfig, coerce_format

_TRUTHY = {"1", "true", "yes", "on"}


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    # Load YAML
    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}

    debug = _as_bool(os.getenv("FAQRENDER_DEBUG", yaml_data.get("debug", False)))

    # Unknown formats fall back to html, same as the renderer does
    fmt_str = os.getenv("FAQRENDER_DEFAULT_FORMAT", yaml_data.get("default_format", "html"))
    default_format = coerce_format(fmt_str) or ContentFormat.HTML

    server_data = yaml_data.get("server", {}) or {}
    server = ServerConfig(
        host=os.getenv("FAQRENDER_HOST", server_data.get("host", "127.0.0.1")),
        port=int(os.getenv("FAQRENDER_PORT", server_data.get("port", 8000))),
    )

    return AppConfig(debug=debug, default_format=default_format, server=server)
