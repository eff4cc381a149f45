from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

CONFIG_FILENAME = "inquirerer.yaml"

_TRUE = {"1", "true", "yes", "on"}


class PrompterConfig(BaseModel):
    no_tty: bool = False
    use_defaults: bool = False
    mutate_args: bool = True
    max_display_lines: int = Field(default=10, ge=1)
    interrupt_exit_code: int = 0
    config_dir: Optional[Path] = None


def _find_config_file(start: Path | None = None) -> Path | None:
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    return raw.strip().lower() in _TRUE


def load_config(start: Path | None = None) -> PrompterConfig:
    config_path = _find_config_file(start)

    if config_path is not None:
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
        config = PrompterConfig.model_validate(raw)
        config.config_dir = config_path.parent
    else:
        config = PrompterConfig()

    no_tty = _env_flag("INQUIRERER_NO_TTY")
    if no_tty is not None:
        config.no_tty = no_tty

    use_defaults = _env_flag("INQUIRERER_USE_DEFAULTS")
    if use_defaults is not None:
        config.use_defaults = use_defaults

    max_lines = os.environ.get("INQUIRERER_MAX_DISPLAY_LINES")
    if max_lines is not None:
        config.max_display_lines = max(1, int(max_lines))

    return config
