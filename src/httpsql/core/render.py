"""Rendering of query responses as console tables."""

import json
import logging
from typing import Any

from rich import box
from rich.table import Table
from rich.text import Text

from .models import QueryResponse


logger = logging.getLogger(__name__)

HEADER_STYLE = "green"
NULL_DISPLAY = "NULL"


def display_value(value: Any) -> str:
    """Convert a single JSON value to the text shown in a table cell."""
    if value is None:
        return NULL_DISPLAY
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def render_result(response: QueryResponse) -> Table:
    """
    Build a bordered table from the columns and rows of a response.

    Missing columns give a header-less table and missing rows a body-less
    one. Rows narrower than the widest of header and rows are padded with
    empty cells.
    """
    columns = response.columns or []
    rows = response.data or []

    width = max([len(columns), *(len(row) for row in rows)])
    if columns and any(len(row) != len(columns) for row in rows):
        logger.warning(
            f"Result rows do not match the {len(columns)} returned columns, "
            f"rendering {width} columns"
        )

    table = Table(
        box=box.ASCII,
        show_header=bool(columns),
        header_style=HEADER_STYLE,
    )
    for index in range(width):
        header = columns[index].name if index < len(columns) else ""
        table.add_column(Text(header, style=HEADER_STYLE), overflow="fold")

    for row in rows:
        cells = [Text(display_value(value)) for value in row]
        cells.extend(Text("") for _ in range(width - len(cells)))
        table.add_row(*cells)

    return table
