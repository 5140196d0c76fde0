"""Configuration models for tinytable."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigurationError

# Environment variable name for each glyph field
STYLE_ENV_VARS = {
    "column_separator": "TINYTABLE_COLUMN_SEPARATOR",
    "row_separator": "TINYTABLE_ROW_SEPARATOR",
    "corner_marker": "TINYTABLE_CORNER_MARKER",
    "header_row_separator": "TINYTABLE_HEADER_ROW_SEPARATOR",
    "header_corner_marker": "TINYTABLE_HEADER_CORNER_MARKER",
}


@dataclass(frozen=True)
class TableStyle:
    """
    Border glyphs used to draw a table.

    Attributes:
        column_separator: Drawn between cells and at both row ends
        row_separator: Fill character of ordinary rules
        corner_marker: Drawn where ordinary rules cross column boundaries
        header_row_separator: Fill character of the rule below the header
        header_corner_marker: Corner character of the rule below the header
    """

    column_separator: str = "|"
    row_separator: str = "-"
    corner_marker: str = "+"
    header_row_separator: str = "="
    header_corner_marker: str = "O"

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"glyph must be a string, got {type(value).__name__}",
                    option=f.name,
                )

    def replace(self, **overrides: str | None) -> TableStyle:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_environment(cls) -> TableStyle:
        """Create TableStyle from TINYTABLE_* environment variables."""
        defaults = cls()
        return cls(
            **{
                name: os.environ.get(env_var, getattr(defaults, name))
                for name, env_var in STYLE_ENV_VARS.items()
            }
        )


@dataclass(frozen=True)
class RenderConfig:
    """
    Layout options for a single render.

    Attributes:
        header_row: Treat the first row as a header and rule it off
        separate_rows: Draw a rule after every data row (header rule uses
            the header glyphs)
        top_and_tail: Skip the outermost top and bottom rules
        ansi: Cells may contain ANSI colour escapes; measure without them
        style: Border glyphs
    """

    header_row: bool = False
    separate_rows: bool = False
    top_and_tail: bool = False
    ansi: bool = False
    style: TableStyle = field(default_factory=TableStyle)

    @classmethod
    def from_options(
        cls,
        *,
        header_row: Any = False,
        separate_rows: Any = False,
        top_and_tail: Any = False,
        ansi: Any = False,
        style: TableStyle | None = None,
        **glyphs: str | None,
    ) -> RenderConfig:
        """
        Build a config from loose keyword options.

        Flags accept any truthy value. Glyph keywords (``corner_marker`` etc.)
        override the matching field of ``style``.

        Raises:
            ConfigurationError: If a glyph keyword is unknown or not a string
        """
        unknown = sorted(set(glyphs) - set(STYLE_ENV_VARS))
        if unknown:
            raise ConfigurationError(
                f"unknown glyph option(s): {', '.join(unknown)}",
                option=unknown[0],
            )
        base = style if style is not None else TableStyle()
        return cls(
            header_row=bool(header_row),
            separate_rows=bool(separate_rows),
            top_and_tail=bool(top_and_tail),
            ansi=bool(ansi),
            style=base.replace(**glyphs),
        )
