"""Timesheet export (CSV / Excel) built from the row view-model."""

from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

COLUMNS = {
    "date": "Date",
    "status": "Status",
    "time_in": "Time In",
    "time_out": "Time Out",
    "minutes_late": "Minutes Late",
    "minutes_early": "Minutes Early",
    "working_hours": "Working Hours",
}


def timesheet_frame(rows: Sequence[dict]) -> pd.DataFrame:
    frame = pd.DataFrame(list(rows), columns=list(COLUMNS))
    frame["working_hours"] = pd.to_numeric(frame["working_hours"])
    return frame.rename(columns=COLUMNS)


def to_csv_bytes(rows: Sequence[dict]) -> bytes:
    # BOM so spreadsheet apps detect UTF-8.
    return timesheet_frame(rows).to_csv(index=False).encode("utf-8-sig")


def to_excel_bytes(rows: Sequence[dict], *, sheet_name: str = "Timesheet") -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        timesheet_frame(rows).to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
