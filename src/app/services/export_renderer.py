"""Export file renderers

Excel exports reuse the CSV renderer and PDF exports are a minimal HTML
table; neither is a real spreadsheet or PDF document.
"""
import csv
import html
import io
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List
from src.domain import ExportFormat, ExportType

FILE_EXTENSIONS = {
    ExportFormat.csv: "csv",
    ExportFormat.excel: "xlsx",
    ExportFormat.pdf: "html",
}

MEDIA_TYPES = {
    ExportFormat.csv: "text/csv",
    ExportFormat.excel: "text/csv",
    ExportFormat.pdf: "text/html",
}


def build_file_name(export_type: ExportType, export_format: ExportFormat, job_id: str) -> str:
    export_type = ExportType(export_type)
    export_format = ExportFormat(export_format)
    return f"{export_type.value}_{export_format.value}_{job_id}.{FILE_EXTENSIONS[export_format]}"


def media_type_for(export_format: ExportFormat) -> str:
    return MEDIA_TYPES[ExportFormat(export_format)]


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def render_csv(rows: List[Dict[str, Any]], headers: List[str]) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(headers)
    for row in rows:
        writer.writerow([format_cell(row.get(header)) for header in headers])
    return buffer.getvalue().encode("utf-8")


def export_title(export_type: ExportType) -> str:
    """'student_nysc' -> 'Student nysc Export'"""
    label = ExportType(export_type).value.replace("_", " ")
    return f"{label[:1].upper()}{label[1:]} Export"


def render_html_table(rows: List[Dict[str, Any]], headers: List[str], title: str) -> bytes:
    parts = [f"<h1>{html.escape(title)}</h1>", "<table border='1'>", "<tr>"]
    parts.extend(f"<th>{html.escape(header)}</th>" for header in headers)
    parts.append("</tr>")
    for row in rows:
        parts.append("<tr>")
        parts.extend(f"<td>{html.escape(format_cell(row.get(header)))}</td>" for header in headers)
        parts.append("</tr>")
    parts.append("</table>")
    return "".join(parts).encode("utf-8")


def render_export(
    rows: List[Dict[str, Any]],
    headers: List[str],
    export_type: ExportType,
    export_format: ExportFormat,
) -> bytes:
    export_format = ExportFormat(export_format)
    if export_format in (ExportFormat.csv, ExportFormat.excel):
        return render_csv(rows, headers)
    if export_format == ExportFormat.pdf:
        return render_html_table(rows, headers, export_title(export_type))
    raise ValueError(f"Unsupported export format: {export_format}")
