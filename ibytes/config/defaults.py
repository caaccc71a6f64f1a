from __future__ import annotations

import json

from ibytes.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()


def config_json(config: AppConfig | None = None) -> str:
    return json.dumps((config or default_config()).to_dict(), indent=2)
