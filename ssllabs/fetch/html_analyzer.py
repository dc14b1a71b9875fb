"""
HTML analysis utilities for SSL Labs report pages.
Regex-based scan of the result tables; tolerant of broken markup, no parser needed.
"""

import re
from typing import Dict, List
from ssllabs.fetch.utils import normalize_cell_text
from ssllabs.schemas import ReportRow, ReportTable


_REPORT_TABLE_RE = re.compile(
    r"""<table[^>]*class=["']reportTable["'][^>]*>.*?</table>""",
    re.IGNORECASE | re.DOTALL,
)
_ROW_RE = re.compile(r"<tr[^>]*>(.*?)</tr>", re.IGNORECASE | re.DOTALL)
# Label body may not run past its own </td>, so the value cell has to be the next cell
_LABEL_VALUE_RE = re.compile(
    r"""<td[^>]*class=["']tableLabel["'][^>]*>((?:(?!</td>).)*)</td>\s*"""
    r"""<td[^>]*class=["']tableCell["'][^>]*>(.*?)</td>""",
    re.IGNORECASE | re.DOTALL,
)


def extract_report_tables(html: str) -> List[ReportTable]:
    """
    Extract every report table from an SSL Labs result page.

    Each `reportTable` block becomes one list of label/value rows, in document
    order. Rows without a tableLabel cell directly followed by a tableCell cell
    are skipped, and a table with no such rows is still returned (empty).
    Never raises; markup without report tables gives [].
    """
    if not html:
        return []

    tables: List[ReportTable] = []
    for table_match in _REPORT_TABLE_RE.finditer(html):
        rows: ReportTable = []
        for row_match in _ROW_RE.finditer(table_match.group(0)):
            row = parse_report_row(row_match.group(1))
            if row is not None:
                rows.append(row)
        tables.append(rows)

    return tables


def parse_report_row(row_html: str):
    """Parse one <tr> body into a ReportRow, or None if it has no label/value pair."""
    cell_match = _LABEL_VALUE_RE.search(row_html)
    if not cell_match:
        return None
    return ReportRow(
        label=normalize_cell_text(cell_match.group(1)),
        value=normalize_cell_text(cell_match.group(2)),
    )


def summarize_tables(tables: List[ReportTable]) -> Dict[str, int]:
    return {
        "tables": len(tables),
        "rows": sum(len(table) for table in tables),
    }
