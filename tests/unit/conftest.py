"""Unit test fixtures."""

import pytest


@pytest.fixture
def roster() -> list[list[str]]:
    """Header plus three data rows with uneven column widths."""
    return [
        ["Name", "Rank", "Serial"],
        ["alice", "pvt", "123456"],
        ["bob", "cpl", "98765321"],
        ["carol", "brig gen", "8745"],
    ]


@pytest.fixture
def ragged() -> list[list[str]]:
    """Rows of differing lengths."""
    return [
        ["a"],
        ["bb", "c", "d"],
        ["eee", "ff"],
    ]
