from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class ExpectConfig(BaseModel):
    """Settings handed to the unittest assertion methods behind each check.

    Attributes:
        max_diff: ``TestCase.maxDiff`` for expect_equal diffs. None means unlimited.
        long_message: Append a short description of the failed predicate to
            the standard actual/expected message, as ``TestCase.longMessage``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_diff: int | None = 640
    long_message: bool = True

    @field_validator("max_diff")
    @classmethod
    def max_diff_must_not_be_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("max_diff must not be negative")
        return v


_active = ExpectConfig()


def get_config() -> ExpectConfig:
    return _active


def configure(config: ExpectConfig | None = None, **overrides: Any) -> ExpectConfig:
    """Install a new active config and return the one it replaced.

    ``overrides`` are applied on top of ``config`` (or the current config when
    none is given) and validated.
    """
    global _active

    base = config if config is not None else _active
    new = ExpectConfig(**{**base.model_dump(), **overrides}) if overrides else base

    previous = _active
    _active = new
    return previous


def load_config(path: Path) -> ExpectConfig:
    """Load and validate a narrowtest config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return ExpectConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(raw).__name__}")

    return ExpectConfig(**raw)
