"""Table converter.

Markdown tables have exactly one header row, so the first row is always used
as the header whatever its cell types; header cells in later rows render as
ordinary cells.

Rows without cells are dropped wherever they appear, not only when they are
the sole row, so a table never contains a blank `|  |` line. A table whose
rows are all empty renders as nothing.
"""

from typing import List

from ..adf_models import AdfNode, ConversionContext
from .base import NodeConverter


class TableConverter(NodeConverter):
    node_types = ("table",)

    def convert(self, node: AdfNode, context: ConversionContext, registry) -> str:
        rows: List[List[str]] = []
        for row in node.content:
            cells = [self._convert_cell(cell, context, registry) for cell in row.content]
            # A row without cells cannot be represented
            if cells:
                rows.append(cells)

        if not rows:
            return ""

        header = rows[0]
        lines = [
            self._format_row(header),
            self._format_row(["---"] * len(header)),
        ]
        lines.extend(self._format_row(row) for row in rows[1:])
        return "\n".join(lines) + "\n\n"

    @staticmethod
    def _convert_cell(cell: AdfNode, context: ConversionContext, registry) -> str:
        content = registry.convert_nodes(cell.content, context.for_table_cell())
        # Cells cannot span lines; unescaped pipes would split the cell
        return content.replace("\n", " ").strip().replace("|", "\\|")

    @staticmethod
    def _format_row(cells: List[str]) -> str:
        return "| " + " | ".join(cells) + " |"
