"""Client-side model of the editable candidate sheet."""

from .grid import BlurOutcome, SheetGrid
from .rows import (
    COLUMNS,
    MIN_VISIBLE_ROWS,
    ROWS_PER_PAGE,
    SheetRow,
    merge_rows,
    pad_rows,
    placeholder_id,
)

__all__ = [
    "BlurOutcome",
    "SheetGrid",
    "SheetRow",
    "COLUMNS",
    "MIN_VISIBLE_ROWS",
    "ROWS_PER_PAGE",
    "merge_rows",
    "pad_rows",
    "placeholder_id",
]
