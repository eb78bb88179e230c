import pytest
from pi.table.table import Table

QUICK_FOX = "the quick brown fox jumps over the lazy dog and more"


@pytest.fixture
def people():
    """Two-column table with one body row."""
    table = Table(["Name", "Age"])
    table.add_row(["Alice", "30"])
    return table


@pytest.fixture
def notes():
    """Table whose second column wraps to 10 usable cells at width 24."""
    table = Table(["id", "text"])
    table.add_row(["1", QUICK_FOX])
    return table
