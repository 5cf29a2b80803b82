"""binstubs.config

Resolve :class:`~binstubs.models.BinstubsConfig` for one run.

Precedence, highest first:

1. explicit overrides (CLI flags)
2. environment variables ``BINSTUBS_TOOLS_FILE`` / ``BINSTUBS_OUTPUT_DIR``,
   including values from a ``.env`` file (never overriding the real
   environment)
3. an optional YAML file (``.binstubs.yml`` by default)
4. built-in defaults (``tools.go`` / ``bin``)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import load_dotenv

from .errors import ConfigError
from .models import DEFAULT_OUTPUT_DIR, DEFAULT_TOOLS_FILE, BinstubsConfig

logger = logging.getLogger(__name__)

ENV_FILE = Path(".env")
CONFIG_FILE = Path(".binstubs.yml")

ENV_TOOLS_FILE = "BINSTUBS_TOOLS_FILE"
ENV_OUTPUT_DIR = "BINSTUBS_OUTPUT_DIR"

CONFIG_KEYS = ("tools_file", "output_dir")


def load_env_file(env_file: Optional[Union[str, Path]] = None) -> bool:
    """Load KEY=VALUE pairs from *env_file* (default ``./.env``) if it exists.

    Variables already present in ``os.environ`` win.
    """
    p = Path(env_file) if env_file is not None else ENV_FILE
    if not p.exists():
        return False
    return load_dotenv(p, override=False)


def load_yaml_config(path: Union[str, Path]) -> Dict[str, str]:
    """Read the YAML config file at *path*.

    Only ``tools_file`` and ``output_dir`` are accepted, both as strings.
    """
    import yaml

    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"invalid YAML in {p}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"config must be a mapping at top level: {p}")

    unknown = sorted(str(k) for k in raw if k not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"unknown key(s) in {p}: {', '.join(unknown)}")

    out: Dict[str, str] = {}
    for key, val in raw.items():
        if not isinstance(val, str) or not val.strip():
            raise ConfigError(f"{key} in {p} must be a non-empty string")
        out[key] = val.strip()
    return out


def _first(*values: Any) -> Optional[str]:
    for v in values:
        if v:
            return str(v)
    return None


def load_config(
    *,
    tools_file: Optional[Union[str, Path]] = None,
    output_dir: Optional[Union[str, Path]] = None,
    config_file: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BinstubsConfig:
    """Build the run configuration.

    An explicitly passed *config_file* must exist; the default
    ``.binstubs.yml`` is read only when present.
    """
    if environ is None:
        load_env_file(env_file)
        environ = os.environ

    file_values: Dict[str, str] = {}
    if config_file is not None:
        file_values = load_yaml_config(config_file)
    elif CONFIG_FILE.exists():
        file_values = load_yaml_config(CONFIG_FILE)

    config = BinstubsConfig(
        tools_file=Path(
            _first(tools_file, environ.get(ENV_TOOLS_FILE), file_values.get("tools_file"))
            or DEFAULT_TOOLS_FILE
        ),
        output_dir=Path(
            _first(output_dir, environ.get(ENV_OUTPUT_DIR), file_values.get("output_dir"))
            or DEFAULT_OUTPUT_DIR
        ),
    )
    logger.debug("config: tools_file=%s output_dir=%s", config.tools_file, config.output_dir)
    return config
