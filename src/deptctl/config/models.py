"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, deptctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from deptctl.domain.commands import DEFAULT_SUGGEST_CUTOFF


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    banner: bool = True
    suggest_cutoff: float = Field(default=DEFAULT_SUGGEST_CUTOFF, ge=0.0, le=1.0)


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    case_insensitive: bool = False
    encoding: str = "utf-8"
    line_numbers: bool = False
