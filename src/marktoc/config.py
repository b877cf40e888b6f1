"""ContextVar-based render configuration for marktoc.

Provides context-local configuration using Python's ContextVars (PEP 567).
A RenderConfig passed explicitly to a renderer wins; otherwise the renderer
reads the active config for the current context when render() starts.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from marktoc.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(heading_class="title")):
        html, headings = HtmlRenderer().render(events)

    # Or from a TOML file
    config = RenderConfig.from_toml("marktoc.toml")

"""

from __future__ import annotations

import tomllib
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
import dataclasses
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from marktoc.errors import ConfigError
from marktoc.policies import CELL_ROLE_POLICIES, DEFAULT_CELL_ROLE
from marktoc.toc import DEFAULT_NESTING, DEFAULT_TOC_TITLE, NESTING_STRATEGIES

_BOOL_FIELDS = ("escape_attributes", "heading_ids")
_OPTIONAL_STR_FIELDS = ("heading_class", "paragraph_class")
_STR_FIELDS = ("cell_role", "toc_nesting", "toc_title")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        heading_class: CSS class added to every heading element
        paragraph_class: CSS class added to every paragraph element
        escape_attributes: HTML-escape interpolated attribute values (class
            names, link and image URLs, alt/title text, code languages).
            Off by default: values are emitted verbatim and must be trusted.
        heading_ids: Emit ``id`` attributes on headings that carry an anchor id
        cell_role: Name of the table cell role policy
        toc_nesting: Name of the TOC nesting strategy
        toc_title: Heading text of the table of contents

    """

    heading_class: str | None = None
    paragraph_class: str | None = None
    escape_attributes: bool = False
    heading_ids: bool = False
    cell_role: str = DEFAULT_CELL_ROLE
    toc_nesting: str = DEFAULT_NESTING
    toc_title: str = DEFAULT_TOC_TITLE

    def __post_init__(self) -> None:
        for name in _OPTIONAL_STR_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {type(value).__name__}")
        for name in _BOOL_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean")
        for name in _STR_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string")
        if self.cell_role not in CELL_ROLE_POLICIES:
            known = ", ".join(sorted(CELL_ROLE_POLICIES))
            raise ConfigError(f"unknown cell_role {self.cell_role!r} (expected one of: {known})")
        if self.toc_nesting not in NESTING_STRATEGIES:
            known = ", ".join(sorted(NESTING_STRATEGIES))
            raise ConfigError(
                f"unknown toc_nesting {self.toc_nesting!r} (expected one of: {known})"
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create RenderConfig from a mapping.

        Only keys that are RenderConfig fields are used; unknown keys are
        ignored so a shared settings table can carry other tools' options.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "heading_class": "title",
            ...     "toc_nesting": "compact",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.toc_nesting
            'compact'

        Raises:
            ConfigError: If a value is invalid
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_toml(cls, path: str | Path) -> RenderConfig:
        """Load configuration from a TOML file.

        Settings are read from a ``[marktoc]`` table when the file has one,
        otherwise from the top level.

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML, or
                holds invalid values
        """
        path = Path(path)
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config file: {e.strerror}", str(path)) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML: {e}", str(path)) from e

        section = data.get("marktoc", data)
        if not isinstance(section, dict):
            raise ConfigError("[marktoc] must be a table", str(path))
        try:
            return cls.from_dict(section)
        except ConfigError as e:
            raise ConfigError(e.message, str(path)) from e

    def replace(self, **changes: Any) -> RenderConfig:
        """Return a copy with ``changes`` applied.

        Raises:
            ConfigError: If a changed value is invalid
        """
        return dataclasses.replace(self, **changes)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the active render configuration for this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[RenderConfig]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(heading_class="x")) as cfg:
        ...     get_render_config().heading_class
        'x'
        >>> get_render_config().heading_class is None
        True
    """
    token = _render_config.set(config)
    try:
        yield config
    finally:
        _render_config.reset(token)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "reset_render_config",
    "render_config_context",
    "set_render_config",
]
