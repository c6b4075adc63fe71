"""Student import CSV layout

The template and the importer share one fixed sixteen column order.
"""
import csv
import io
from datetime import date
from typing import Any, Dict, Iterator, List, Optional, Tuple

TEMPLATE_HEADERS = [
    "First Name",
    "Last Name",
    "Middle Name",
    "Matric Number",
    "Email",
    "Phone",
    "Gender",
    "Date of Birth (YYYY-MM-DD)",
    "State of Origin",
    "LGA",
    "Course of Study",
    "Department",
    "Graduation Year",
    "CGPA",
    "JAMB Number",
    "Study Mode",
]

TEMPLATE_SAMPLE_ROW = [
    "John",
    "Doe",
    "Smith",
    "VUG/CSC/16/1001",
    "john.doe@example.com",
    "08012345678",
    "Male",
    "1995-05-15",
    "Lagos",
    "Ikeja",
    "Computer Science",
    "Computer Science",
    "2020",
    "3.50",
    "JAM123456789",
    "full-time",
]

IMPORT_COLUMNS = [
    "fname",
    "lname",
    "mname",
    "matric_no",
    "email",
    "phone",
    "gender",
    "dob",
    "state_of_origin",
    "lga",
    "course_of_study",
    "department",
    "graduation_year",
    "cgpa",
    "jambno",
    "study_mode",
]

REQUIRED_COLUMNS = ("fname", "lname", "matric_no")

DEFAULT_STUDY_MODE = "full-time"


def build_template() -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(TEMPLATE_HEADERS)
    writer.writerow(TEMPLATE_SAMPLE_ROW)
    return buffer.getvalue().encode("utf-8")


def decode_csv(content: bytes) -> str:
    """Raises UnicodeDecodeError for anything but UTF-8 (a leading BOM is dropped)"""
    return content.decode("utf-8-sig")


def iter_rows(text: str) -> Iterator[Tuple[int, List[str]]]:
    """Yield (row number, cells) for every data row; row 1 is the header"""
    reader = csv.reader(io.StringIO(text))
    next(reader, None)
    row_number = 1
    for cells in reader:
        row_number += 1
        if not any(cell.strip() for cell in cells):
            continue
        yield row_number, cells


def map_row(cells: List[str]) -> Dict[str, str]:
    """Positional mapping; missing trailing cells become empty strings"""
    values = {column: (cells[index].strip() if index < len(cells) else "") for index, column in enumerate(IMPORT_COLUMNS)}
    values["study_mode"] = values["study_mode"] or DEFAULT_STUDY_MODE
    return values


def missing_required(values: Dict[str, str]) -> bool:
    return any(not values.get(column) for column in REQUIRED_COLUMNS)


def _optional(value: str) -> Optional[str]:
    return value or None


def to_student_fields(values: Dict[str, str]) -> Dict[str, Any]:
    """
    Convert raw cells to Student field values

    Raises:
        ValueError: if the date of birth or CGPA cannot be parsed
    """
    fields: Dict[str, Any] = {column: _optional(values[column]) for column in IMPORT_COLUMNS}
    fields["fname"] = values["fname"]
    fields["lname"] = values["lname"]
    fields["matric_no"] = values["matric_no"]
    fields["dob"] = date.fromisoformat(values["dob"]) if values["dob"] else None
    fields["cgpa"] = float(values["cgpa"]) if values["cgpa"] else None
    if fields["gender"]:
        fields["gender"] = fields["gender"].lower()
    return fields
