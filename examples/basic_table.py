#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates the tinytable layout options.

Run:
    uv run python examples/basic_table.py
"""

from tinytable import ConfigurationError, TableStyle, generate_table

ROWS = [
    ["Name", "Rank", "Serial"],
    ["alice", "pvt", "123456"],
    ["bob", "cpl", "98765321"],
    ["carol", "brig gen", "8745"],
]


def main() -> None:
    print("=== Minimal ruling ===\n")
    print(generate_table(ROWS))

    print("\n=== Header row ===\n")
    print(generate_table(ROWS, header_row=True))

    print("\n=== Header row, separate rows ===\n")
    print(generate_table(ROWS, header_row=True, separate_rows=True))

    print("\n=== Top and tail ===\n")
    print(generate_table(ROWS, header_row=True, top_and_tail=True))

    print("\n=== ANSI colours ===\n")
    coloured = [
        ["Check", "Result"],
        ["lint", "\x1b[32mpass\x1b[0m"],
        ["tests", "\x1b[1;31mfail\x1b[0m"],
    ]
    print(generate_table(coloured, header_row=True, ansi=True))

    print("\n=== Custom glyphs ===\n")
    style = TableStyle(column_separator=":", row_separator="~", corner_marker="*")
    print(generate_table(ROWS, header_row=True, style=style))

    print("\n=== Errors ===\n")
    try:
        generate_table([])
    except ConfigurationError as e:
        print(f"ConfigurationError: {e}")


if __name__ == "__main__":
    main()
