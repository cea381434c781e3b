# components/tables.py
"""Tabular views of calculator results.

Schedules are turned into pandas DataFrames for ``st.dataframe`` and CSV
download, and into a small PDF report via reportlab.
"""

from __future__ import annotations

import io
from typing import Dict, Mapping, Optional, Sequence

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..calculators.amortization import PeriodRow, YearSummary
from ..formatters import format_currency, format_number_with_commas
from ..validation import format_field_name, is_valid_number

SCHEDULE_COLUMNS = ["Month", "Payment", "Principal", "Interest", "Balance"]
YEARLY_COLUMNS = ["Year", "Total Payment", "Principal", "Interest", "End Balance"]
GROWTH_COLUMNS = ["Year", "Contributions", "Interest", "Balance"]
PDF_ROW_LIMIT = 360


def schedule_frame(rows: Sequence[PeriodRow]) -> pd.DataFrame:
    """One row per month."""
    return pd.DataFrame(
        [(r.index, r.payment, r.principal_portion, r.interest_portion, r.ending_balance) for r in rows],
        columns=SCHEDULE_COLUMNS,
    )


def yearly_frame(years: Sequence[YearSummary]) -> pd.DataFrame:
    return pd.DataFrame(
        [(y.year, y.total_payment, y.total_principal, y.total_interest, y.end_balance) for y in years],
        columns=YEARLY_COLUMNS,
    )


def growth_frame(rows: Sequence[Mapping[str, float]]) -> pd.DataFrame:
    df = pd.DataFrame(list(rows), columns=["year", "contributions", "interest", "balance"])
    df.columns = GROWTH_COLUMNS
    return df


def money_format(df: pd.DataFrame, skip: Sequence[str] = ("Month", "Year")) -> Dict[str, str]:
    """Column -> format string for ``DataFrame.style.format``."""
    return {c: "${:,.2f}" for c in df.columns if c not in skip}


def frame_to_csv(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")


def input_rows(inputs: Mapping[str, object]):
    """``[label, value]`` pairs for the report's inputs table; numbers get commas."""
    return [
        [format_field_name(k), format_number_with_commas(v) if is_valid_number(v) else str(v)]
        for k, v in inputs.items()
    ]


def build_pdf(
    title: str,
    inputs: Mapping[str, object],
    summary: Mapping[str, object],
    frame: Optional[pd.DataFrame] = None,
) -> bytes:
    """Create a PDF report with inputs, the result summary and a schedule."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, leftMargin=36, rightMargin=36)
    styles = getSampleStyleSheet()
    story = [Paragraph(title, styles["Title"]), Spacer(1, 12)]

    def _kv_table(heading: str, rows):
        story.append(Paragraph(heading, styles["Heading2"]))
        rows = [["Field", "Value"]] + rows
        table = Table(rows, hAlign="LEFT")
        table.setStyle(_table_style())
        story.extend([table, Spacer(1, 12)])

    _kv_table("Inputs", input_rows(inputs))
    _kv_table("Results", [[str(k), str(v)] for k, v in summary.items()])

    if frame is not None and not frame.empty:
        story.append(Paragraph("Schedule", styles["Heading2"]))
        shown = frame.head(PDF_ROW_LIMIT)
        rows = [list(shown.columns)]
        for record in shown.itertuples(index=False):
            rows.append([
                str(v) if col in ("Month", "Year") else format_currency(v, include_decimals=True)
                for col, v in zip(shown.columns, record)
            ])
        table = Table(rows, hAlign="LEFT", repeatRows=1)
        table.setStyle(_table_style())
        story.append(table)
        if len(frame) > PDF_ROW_LIMIT:
            story.append(Paragraph(f"First {PDF_ROW_LIMIT} of {len(frame)} rows shown.", styles["Italic"]))

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


def _table_style() -> TableStyle:
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E6ECE9")),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ]
    )
