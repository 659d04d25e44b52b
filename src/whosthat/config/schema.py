"""Typed configuration schema and loader for the whosthat package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ApiSettings(BaseModel):
    """Upstream REST API access settings."""

    base_url: str
    base_url_env: str
    timeout_s: confloat(gt=0.0) = 15.0
    max_attempts: conint(ge=1) = 2
    user_agent: str
    language: str
    list_limit: conint(ge=1) = 100000

    model_config = ConfigDict(extra="forbid")


class GameSettings(BaseModel):
    """Initial game settings and sampling policy."""

    rounds: conint(ge=1, le=10)
    entities_per_round: conint(ge=1, le=6)
    generations: list[conint(ge=0)]
    seed: int | None = None
    population_policy: Literal["reject", "clamp"]

    model_config = ConfigDict(extra="forbid")

    @field_validator("generations")
    @classmethod
    def _non_empty(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("at least one generation must be included")
        return value


class RedactSettings(BaseModel):
    """Mask appearance."""

    mask_char: str
    mask_length: conint(ge=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("mask_char")
    @classmethod
    def _single_word_char(cls, value: str) -> str:
        # A word character keeps masked pieces aligned with the tokenizer.
        if len(value) != 1 or not (value.isalnum() or value == "_"):
            raise ValueError("mask_char must be a single word character")
        return value

    @property
    def mask(self) -> str:
        return self.mask_char * self.mask_length


class VerificationSettings(BaseModel):
    """Verification behaviour after redaction."""

    fail_on_residual: bool

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Package logger level."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    api: ApiSettings
    game: GameSettings
    redact: RedactSettings
    verification: VerificationSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < the
    environment variable named by ``api.base_url_env``.
    """

    with (
        importlib_resources.files("whosthat.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    base_url = environ.get(cfg.api.base_url_env)
    if base_url:
        cfg.api.base_url = base_url

    return cfg


__all__ = [
    "ConfigModel",
    "ApiSettings",
    "GameSettings",
    "RedactSettings",
    "VerificationSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
