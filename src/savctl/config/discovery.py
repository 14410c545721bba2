"""Locate ``savctl.toml`` and the root that relative database paths use.

Lookup order: ``--config``, then ``SAVCTL_CONFIG``, then the nearest
``savctl.toml`` in the working directory or one of its parents. A file
named by flag or env var must exist; a missing walk-up match just means
running on defaults.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import click

CONFIG_FILENAME = "savctl.toml"
CONFIG_ENV_VAR = "SAVCTL_CONFIG"


@dataclass(frozen=True)
class ConfigLocation:
    """Where settings come from.

    Attributes:
        path: TOML file to load, or None to use defaults and env vars only.
        root: Directory that ``[database] path`` is resolved against.
    """

    path: Path | None
    root: Path


def locate_config(explicit: str | None = None, root: Path | None = None) -> ConfigLocation:
    """Resolve the config file and root for one invocation.

    An explicit *root* wins; otherwise the root is the config file's
    directory, or the working directory when there is no file.

    Raises:
        click.ClickException: the flag or env var names a missing file.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise click.ClickException(msg)
        return ConfigLocation(path=path, root=root or path.resolve().parent)

    start = (root or Path.cwd()).resolve()
    found = next(
        (candidate for candidate in _candidates(start) if candidate.is_file()),
        None,
    )
    return ConfigLocation(path=found, root=root or (found.parent if found else start))


def _candidates(start: Path) -> Iterator[Path]:
    yield start / CONFIG_FILENAME
    for parent in start.parents:
        yield parent / CONFIG_FILENAME
