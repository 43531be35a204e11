"""
HTML report rendering for Employee Time Visualizer.

PURPOSE: Format the ranked employee summary as a self-contained HTML page.
Pure formatting: rows arrive ranked and are emitted in the same order.

OUTPUT:
- Inline CSS only, no scripts or external assets
- Rows under 100 total hours carry class="low-hours"
- Employee names are HTML-escaped

USAGE:
    html_text = render_report_html(summaries)
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from .config import Config
from .models import EmployeeSummary
from .presenters import EmployeeRowViewModel, ReportPresenter

__all__ = ["render_report_html"]

_REPORT_CSS = """\
        body { font-family: Arial, sans-serif; margin: 20px; }
        table { border-collapse: collapse; width: 100%; max-width: 600px; }
        th, td { border: 1px solid #ddd; padding: 12px; text-align: left; }
        th { background-color: #f2f2f2; font-weight: bold; }
        .low-hours { background-color: #ffebee; }
        .hours-cell { text-align: right; }
        h1 { color: #333; }"""


def _render_row(row: EmployeeRowViewModel) -> str:
    """
    Render one employee as a table row.

    Args:
        row: Row view model; its row_class decides the low-hours flag.

    Returns:
        '<tr>' element with name and hours cells, indented for the
        surrounding tbody.
    """
    class_attr = f' class="{row.row_class}"' if row.row_class else ""
    return (
        f"            <tr{class_attr}>\n"
        f"                <td>{html.escape(row.name)}</td>\n"
        f'                <td class="hours-cell">{row.hours_display}</td>\n'
        f"            </tr>\n"
    )


def render_report_html(
    summaries: Sequence[EmployeeSummary],
    presenter: ReportPresenter | None = None,
) -> str:
    """
    Render the ranked summary as a complete HTML document.

    Generates a page with a title, a caption explaining the ordering, and
    a two-column table (Employee Name, Total Hours Worked). Hours use two
    decimal places. Rows for employees under the low-hours threshold get
    a tinted background.

    Business context: The report is the shareable, exact companion to the
    pie chart; it highlights employees who logged under 100 hours.

    Args:
        summaries: Ranked employee totals. Not re-sorted.
        presenter: Optional ReportPresenter for testability. Defaults to
            a new instance.

    Returns:
        HTML string starting with '<!DOCTYPE html>'. Identical input
        produces identical output.

    Raises:
        None: String construction never raises.

    Example:
        >>> page = render_report_html([EmployeeSummary('Solo', 150.0)])
        >>> '150.00' in page and 'low-hours"' not in page.split('<tbody>')[1]
        True
    """
    presenter = presenter or ReportPresenter()
    rows = "".join(_render_row(row) for row in presenter.get_rows(summaries))
    title = html.escape(Config.REPORT_TITLE)
    caption = html.escape(Config.REPORT_CAPTION)

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
{_REPORT_CSS}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <p>{caption}</p>
    <table>
        <thead>
            <tr>
                <th>Employee Name</th>
                <th>Total Hours Worked</th>
            </tr>
        </thead>
        <tbody>
{rows}        </tbody>
    </table>
</body>
</html>
"""
