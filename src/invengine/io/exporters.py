"""Result export helpers."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from invengine.core.primitives import OpStats
from invengine.viz.charts import build_inversion_depth_chart, build_window_sum_series


def export_csv(path: Path, rows: Iterable[dict]) -> None:
    """Write result rows to CSV."""

    rows = list(rows)
    if not rows:
        path.write_text("", encoding="utf-8")
        return
    header = list(rows[0].keys())
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=header)
        writer.writeheader()
        writer.writerows(rows)


def export_json(path: Path, payload: Dict[str, Any]) -> None:
    """Write a result summary as indented JSON."""

    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _fig_to_image(fig: Any, width: int = 400, height: int = 300) -> Image:
    """Convert a Matplotlib figure to a ReportLab Image."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=100)
    buf.seek(0)
    return Image(buf, width=width, height=height)


def export_pdf(
    path: Path,
    summary: Dict[str, Any],
    *,
    values: Sequence[int] | None = None,
    k: int | None = None,
    stats: OpStats | None = None,
) -> None:
    """Generate a PDF report using ReportLab.

    The window-sum chart is included when both ``values`` and ``k`` are given,
    the depth chart when ``stats`` is given.
    """

    doc = SimpleDocTemplate(str(path), pagesize=letter)
    styles = getSampleStyleSheet()
    story = []

    story.append(Paragraph("Inversion Engine Report", styles['Title']))
    story.append(Spacer(1, 12))

    story.append(Paragraph("Results", styles['Heading2']))
    table_data = [["Metric", "Value"]]
    table_data.extend([str(key), str(value)] for key, value in summary.items())
    t = Table(table_data, colWidths=[200, 200])
    t.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
        ('GRID', (0, 0), (-1, -1), 1, colors.black)
    ]))
    story.append(t)
    story.append(Spacer(1, 20))

    if stats is not None:
        story.append(Paragraph("Operation Counts", styles['Heading2']))
        ops_data = [
            ["Operation", "Count"],
            ["Comparisons", str(stats.comparisons)],
            ["Swaps", str(stats.swaps)],
            ["Block exchanges", str(stats.block_exchanges)],
            ["Element moves", str(stats.moves)],
            ["Merges", str(stats.merges)],
        ]
        t2 = Table(ops_data, colWidths=[200, 200])
        t2.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.blue),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('GRID', (0, 0), (-1, -1), 1, colors.black)
        ]))
        story.append(t2)
        story.append(Spacer(1, 20))

    has_windows = values is not None and k is not None
    if has_windows or stats is not None:
        story.append(Paragraph("Visualisations", styles['Heading2']))

    if has_windows:
        story.append(_fig_to_image(build_window_sum_series(values, k), width=400, height=300))
        story.append(Spacer(1, 12))

    if stats is not None:
        story.append(_fig_to_image(build_inversion_depth_chart(stats), width=400, height=300))

    doc.build(story)
