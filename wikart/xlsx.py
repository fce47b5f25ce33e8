"""Utilities for exporting wiki articles to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from .registry import ArticleRegistry

Sheets = Dict[str, List[Dict[str, Any]]]


def _flatten(registry: ArticleRegistry) -> Sheets:
    """Flatten the registry into tabular sheet data.

    Args:
        registry: Registry holding the parsed articles.

    Returns:
        Mapping of sheet names to row dictionaries.
    """

    sheets: Sheets = {"Article": [], "Field": []}

    for key, article in registry.articles.items():
        # Fields are identified by the article key and their position.
        field_ids: List[str] = []
        for position, fld in enumerate(article.fields):
            field_id = f"{key}#{position}"
            field_ids.append(field_id)
            sheets["Field"].append(
                {
                    "field_id": field_id,
                    "parent_id": key,
                    "position": position,
                    "name": fld.name,
                    "value": fld.value,
                    "inline": fld.inline,
                }
            )

        sheets["Article"].append(
            {
                "article_id": key,
                "title": article.title,
                "body": article.body,
                "footer": article.footer,
                "author_flag": article.author_flag,
                "fields": ",".join(field_ids),
            }
        )

    # Drop sheets for which no data was recorded.
    return {name: rows for name, rows in sheets.items() if rows}


def write_workbook(registry: ArticleRegistry, path: Path) -> None:
    """Write the registry into an Excel workbook.

    Args:
        registry: Registry holding the parsed articles.
        path: Destination file path for the workbook.
    """

    data = _flatten(registry)

    workbook = Workbook()

    # Remove the default sheet created by openpyxl when present.
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    for sheet_name, rows in data.items():
        ws = workbook.create_sheet(title=sheet_name)

        headers = list(rows[0].keys())
        ws.append(headers)

        # Columns holding long or multi-line text are wrapped and widened.
        long_text_columns: set[int] = set()

        for row in rows:
            values: List[Any] = []
            for idx, header in enumerate(headers):
                cell_value = row.get(header)
                if isinstance(cell_value, str) and (
                    len(cell_value) > 50 or "\n" in cell_value
                ):
                    long_text_columns.add(idx)
                values.append(cell_value)
            ws.append(values)

        for col_idx in long_text_columns:
            for col_cells in ws.iter_cols(
                min_col=col_idx + 1,
                max_col=col_idx + 1,
                min_row=1,
                max_row=ws.max_row,
            ):
                for cell in col_cells:
                    cell.alignment = Alignment(wrapText=True)

        for idx in range(len(headers)):
            col_letter = get_column_letter(idx + 1)
            width = 100 if idx in long_text_columns else 16
            ws.column_dimensions[col_letter].width = width

        # Determine table range covering the header and all rows.
        end_column = get_column_letter(len(headers))
        end_row = len(rows) + 1
        table = Table(displayName=sheet_name, ref=f"A1:{end_column}{end_row}")

        # Apply a simple table style with row stripes for readability.
        style = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True)
        table.tableStyleInfo = style

        ws.add_table(table)

    workbook.save(path)
