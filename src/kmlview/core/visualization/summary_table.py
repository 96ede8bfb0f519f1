"""
Summary table of geometry counts.
"""

from typing import Dict, List, Tuple

from kmlview.core.parsers import GeometryKind


def summary_rows(summary: Dict[str, int]) -> List[Tuple[str, int]]:
    """
    Rows of the summary table.

    Kinds with a zero count are left out; rows follow GeometryKind order.
    """
    return [
        (kind.value, summary.get(kind.value, 0))
        for kind in GeometryKind
        if summary.get(kind.value, 0) > 0
    ]


def render_summary_html(summary: Dict[str, int]) -> str:
    """Render the summary as a small HTML table."""
    body = "".join(
        f"<tr><td>{kind}</td><td>{count}</td></tr>"
        for kind, count in summary_rows(summary)
    )
    return (
        '<table border="1">'
        "<thead><tr><th>Element Type</th><th>Count</th></tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )
