"""
Unit tests for export file rendering
"""
from datetime import datetime
from src.app.services.export_projections import fields_for
from src.app.services.export_renderer import (
    build_file_name,
    export_title,
    format_cell,
    media_type_for,
    render_export,
)
from src.domain import ExportFormat, ExportType


def test_empty_csv_export_is_header_only():
    content = render_export([], fields_for(ExportType.payments), ExportType.payments, ExportFormat.csv)

    lines = content.decode("utf-8").splitlines()
    assert lines == [",".join(fields_for(ExportType.payments))]


def test_excel_export_uses_csv_layout():
    rows = [{"Payment ID": 1, "Amount": 500}]
    headers = fields_for(ExportType.payments)

    csv_content = render_export(rows, headers, ExportType.payments, ExportFormat.csv)
    excel_content = render_export(rows, headers, ExportType.payments, ExportFormat.excel)

    assert excel_content == csv_content


def test_pdf_export_is_escaped_html_table():
    rows = [{"Submission ID": 1, "Review Notes": "<b>ok</b> & done"}]

    content = render_export(
        rows, fields_for(ExportType.submissions), ExportType.submissions, ExportFormat.pdf
    ).decode("utf-8")

    assert content.startswith("<h1>Submissions Export</h1>")
    assert "<table border='1'>" in content
    assert "<th>Submission ID</th>" in content
    assert "&lt;b&gt;ok&lt;/b&gt; &amp; done" in content
    assert "<b>ok</b>" not in content


def test_export_title():
    assert export_title(ExportType.student_nysc) == "Student nysc Export"
    assert export_title(ExportType.payments) == "Payments Export"


def test_file_names_and_media_types():
    assert build_file_name(ExportType.student_nysc, ExportFormat.csv, "export_1") == "student_nysc_csv_export_1.csv"
    assert build_file_name(ExportType.payments, ExportFormat.excel, "export_1") == "payments_excel_export_1.xlsx"
    assert build_file_name(ExportType.submissions, ExportFormat.pdf, "export_1") == "submissions_pdf_export_1.html"
    assert media_type_for(ExportFormat.pdf) == "text/html"
    assert media_type_for(ExportFormat.excel) == "text/csv"


def test_format_cell():
    assert format_cell(None) == ""
    assert format_cell(datetime(2024, 3, 1, 9, 30)) == "2024-03-01 09:30:00"
    assert format_cell(ExportFormat.csv) == "csv"
    assert format_cell(500) == "500"
