"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, utilkit.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from utilkit.domain.merge import ArrayMode

DEFAULT_DEBOUNCE_WAIT_MS = 10


class DebounceConfig(BaseModel):
    """[debounce] section."""

    model_config = {"frozen": True}

    wait_ms: float = Field(default=DEFAULT_DEBOUNCE_WAIT_MS, ge=0)


class MergeConfig(BaseModel):
    """[merge] section."""

    model_config = {"frozen": True}

    array_mode: ArrayMode = ArrayMode.MERGE


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    indent: int = 2

