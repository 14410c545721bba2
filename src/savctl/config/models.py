"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, savctl.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: Path = Path(".savctl/savctl.db")
    url: str | None = None
    echo: bool = False


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    default_limit: int = Field(default=200, gt=0)
    max_limit: int = Field(default=200, gt=0)

    @model_validator(mode="after")
    def check_limits(self) -> SearchConfig:
        if self.default_limit > self.max_limit:
            msg = "default_limit must not exceed max_limit"
            raise ValueError(msg)
        return self


class OperatorConfig(BaseModel):
    """[operator] section: identity used by the CLI when it searches."""

    model_config = {"frozen": True}

    username: str = "mifos"
    office_hierarchy: str = "."
    permissions: list[str] = Field(default_factory=lambda: ["ALL_FUNCTIONS"])
    tenant: str = "default"
    timezone: str = "UTC"

