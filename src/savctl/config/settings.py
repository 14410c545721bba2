"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SAVCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``savctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from savctl.config.discovery import locate_config
from savctl.config.models import DatabaseConfig, OperatorConfig, SearchConfig
from savctl.domain.context import RequestContext


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``savctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is handed to settings_customise_sources during construction.
_tls = threading.local()


class SavSettings(BaseSettings):
    """Settings for the savctl CLI, frozen after construction.

    Attributes:
        root: Directory relative database paths resolve against (parent of
            ``savctl.toml``, or CWD if no config found).
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SAVCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    operator: OperatorConfig = Field(default_factory=OperatorConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        db_path: str | None = None,
        **cli_flags: Any,
    ) -> SavSettings:
        """Construct settings from a CLI invocation.

        *db_path* (``--db``) overrides ``[database] path`` and clears any
        configured URL.
        """
        location = locate_config(config_path, root)

        _tls.toml_path = location.path
        try:
            settings = cls(root=location.root, config_path=location.path, **cli_flags)
        finally:
            _tls.toml_path = None

        if db_path:
            database = settings.database.model_copy(update={"path": Path(db_path), "url": None})
            settings = settings.model_copy(update={"database": database})
        return settings

    def operator_context(self) -> RequestContext:
        """Request context for searches issued by the configured operator."""
        op = self.operator
        return RequestContext(
            username=op.username,
            office_hierarchy=op.office_hierarchy,
            permissions=frozenset(op.permissions),
            tenant=op.tenant,
            timezone=op.timezone,
        )
