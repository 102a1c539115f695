"""Configuration system for Capline.

Layered config loading (lowest to highest priority):
1. config/default.toml (shipped with package)
2. ~/.config/capline/config.toml (user-level)
3. ./capline.toml (project-level)
4. Environment variables (CAPLINE_CHUNKING__MAX_WORDS_PER_CHUNK, etc.)
5. CLI flags
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_DEFAULT_CONFIG = _PACKAGE_ROOT / "config" / "default.toml"
_USER_CONFIG = Path.home() / ".config" / "capline" / "config.toml"
_PROJECT_CONFIG = Path("capline.toml")


class ChunkingConfig(BaseModel):
    max_words_per_chunk: int = Field(default=6, ge=1)


class PlayerConfig(BaseModel):
    word_level_highlighting: bool = True


class ValidationConfig(BaseModel):
    strict: bool = False  # Also report blocks the parser skipped


class OutputConfig(BaseModel):
    format: str = "srt"  # "srt", "vtt", "ass" or "txt"
    captions_json: bool = True


class CaplineConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CAPLINE_",
        env_nested_delimiter="__",
    )

    chunking: ChunkingConfig = ChunkingConfig()
    player: PlayerConfig = PlayerConfig()
    validation: ValidationConfig = ValidationConfig()
    output: OutputConfig = OutputConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # CLI overrides > env vars > TOML layers
        return (
            init_settings,
            env_settings,
            InitSettingsSource(settings_cls, _load_toml_layers()),
        )


def _load_toml(path: Path) -> dict:
    """Load a TOML file if it exists, return empty dict otherwise."""
    if path.is_file():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_toml_layers() -> dict:
    """Merge default, user and project TOML files (Layers 1-3)."""
    config_data: dict = {}
    for path in (_DEFAULT_CONFIG, _USER_CONFIG, _PROJECT_CONFIG):
        config_data = _deep_merge(config_data, _load_toml(path))
    return config_data


def load_config(**cli_overrides: object) -> CaplineConfig:
    """Load configuration from all layers and merge.

    Args:
        **cli_overrides: Direct overrides from CLI flags. Keys can be
            dot-separated (e.g. chunking.max_words_per_chunk=4). None
            values are ignored.
    """
    overrides: dict = {}
    for key, value in cli_overrides.items():
        if value is None:
            continue
        parts = key.split(".")
        target = overrides
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = value

    return CaplineConfig(**overrides)
