"""
tinytable: simple text tables from two-dimensional lists.

This library renders a grid of strings as a bordered, fixed-width table:
- Optional header row with its own rule
- Optional rules between every row
- Optional suppression of the top and bottom border
- ANSI colour aware column widths
- Overridable border glyphs

Example:
    from tinytable import generate_table

    rows = [
        ["Name", "Rank", "Serial"],
        ["alice", "pvt", "123456"],
        ["bob", "cpl", "98765321"],
        ["carol", "brig gen", "8745"],
    ]
    print(generate_table(rows, header_row=True))

    +-------+----------+----------+
    | Name  | Rank     | Serial   |
    +-------+----------+----------+
    | alice | pvt      | 123456   |
    | bob   | cpl      | 98765321 |
    | carol | brig gen | 8745     |
    +-------+----------+----------+
"""

from importlib.metadata import PackageNotFoundError, version

from .ansi import remove_ansi_color, visible_length
from .exceptions import ConfigurationError, TinyTableError
from .models import RenderConfig, TableStyle
from .table import TableRenderer, generate_table, table

try:
    __version__ = version("tinytable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Rendering
    "generate_table",
    "table",
    "TableRenderer",
    # Configuration
    "RenderConfig",
    "TableStyle",
    # ANSI helpers
    "remove_ansi_color",
    "visible_length",
    # Exceptions
    "TinyTableError",
    "ConfigurationError",
]
