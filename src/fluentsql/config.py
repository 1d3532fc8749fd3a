"""Render options and loading them from YAML, TOML, or JSON files."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .exc import ConfigError

log = logging.getLogger("fluentsql.config")


@dataclass(frozen=True)
class RenderOptions:
    """Switches controlling how statements render and reset.

    ``set_keyword=False`` drops the ``SET`` token from UPDATE statements and
    ``keep_assignments_on_clear=True`` makes ``UpdateStatement.clear()`` keep
    the accumulated assignments.  Both reproduce the output of older callers.
    """

    set_keyword: bool = True
    keep_assignments_on_clear: bool = False

    @classmethod
    def legacy(cls) -> RenderOptions:
        """Options matching the historical rendering."""
        return cls(set_keyword=False, keep_assignments_on_clear=True)

    @classmethod
    def from_config(cls, data: dict[str, Any]) -> RenderOptions:
        """Build options from a mapping.

        Accepts either ``{"render": {...}}`` or the option keys at top level.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        section = data.get('render', data)
        if not isinstance(section, dict):
            raise ConfigError("'render' section must be a mapping")

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(f"Unknown render option(s): {', '.join(unknown)}")

        values: dict[str, bool] = {}
        for name, value in section.items():
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Render option {name!r} must be a boolean, got {value!r}"
                )
            values[name] = value
        return cls(**values)


# ── Readers: config text -> mapping ──────────────────────────────

def _read_json(text: str) -> Any:
    return json.loads(text)


def _read_toml(text: str) -> Any:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            raise ImportError(
                "Reading .toml render options needs Python 3.11+ or 'tomli': "
                "pip install fluentsql[toml]"
            )
    return tomllib.loads(text)


def _read_yaml(text: str) -> Any:
    try:
        import yaml
    except ModuleNotFoundError:
        raise ImportError(
            "Reading .yaml render options needs 'pyyaml': pip install fluentsql[yaml]"
        )
    return yaml.safe_load(text)


_READERS = {
    '.json': _read_json,
    '.toml': _read_toml,
    '.yaml': _read_yaml,
    '.yml': _read_yaml,
}


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a render-options file into a mapping.

    The reader is picked from the file extension (see ``_READERS``).
    An empty file yields an empty mapping.
    """
    path = Path(path)
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ValueError(
            f"Unsupported config file extension {path.suffix!r}; "
            f"expected one of {', '.join(sorted(_READERS))}"
        )
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    log.debug("Loading render options from %s", path)
    data = reader(path.read_text(encoding='utf-8'))
    return data if data is not None else {}


def options_from_config(path: str | Path) -> RenderOptions:
    """Load :class:`RenderOptions` from a ``.json``, ``.toml`` or ``.yaml`` file."""
    return RenderOptions.from_config(load_config(path))
