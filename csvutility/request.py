"""Reading and validating the CSV matrix uploaded with a request."""

import csv
import io
import logging
import re
from http import HTTPStatus

from csvutility.errors import ApiError

logger = logging.getLogger(__name__)

FILE_FIELD = "file"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def atoi(text):
    """Parse a signed 64-bit decimal integer, strictly; raise ValueError otherwise."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


def read_csv(data):
    """Parse CSV text or bytes into a list of records of equal width."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    reader = csv.reader(io.StringIO(data, newline=""), strict=True)
    records = []
    width = None
    try:
        for row in reader:
            if not row:
                continue
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ValueError(f"record on line {reader.line_num}: wrong number of fields")
            records.append(row)
    except csv.Error as err:
        raise ValueError(f"record on line {reader.line_num}: {err}") from err
    return records


def validate_csv(records):
    """Check that the records form a non-empty square matrix of integers."""
    validate_csv_on_row_col_size(records)
    validate_csv_cell_value(records)


def validate_csv_on_row_col_size(records):
    """Raise ValueError unless the records are non-empty and square."""
    if not records:
        logger.info("empty CSV file")
        raise ValueError("given file has no content")
    rows, cols = len(records), len(records[0])
    if rows != cols:
        logger.info("given csv file is not square matrix")
        raise ValueError(f"no of rows {rows} is not equal to no of columns {cols}")


def validate_csv_cell_value(records):
    """Raise ValueError naming the first cell that is not an integer."""
    for row_index, record in enumerate(records):
        for col_index, value in enumerate(record):
            try:
                atoi(value)
            except ValueError:
                logger.info("csv cell (%d:%d) value is not an integer", row_index, col_index)
                raise ValueError(
                    f"cell({row_index}, {col_index}) value is not an integer"
                ) from None


def _read_uploaded_csv(request):
    if request.mimetype != "multipart/form-data":
        logger.info("request is not multipart/form-data")
        raise ValueError("request Content-Type isn't multipart/form-data")
    upload = request.files.get(FILE_FIELD)
    if upload is None:
        logger.info("no csv file in request")
        raise ValueError("http: no such file")
    try:
        data = upload.stream.read()
    finally:
        upload.close()
    records = read_csv(data)
    validate_csv(records)
    return records


def parse_csv(request):
    """Return the validated records of the uploaded file, or raise ApiError (400)."""
    try:
        return _read_uploaded_csv(request)
    except ValueError as err:
        raise ApiError(str(err), HTTPStatus.BAD_REQUEST, cause=err) from err


def get_csv_content(request):
    """Return the uploaded records of a POST request, or raise ApiError."""
    if request.method != "POST":
        logger.info("%s method not allowed in place of POST", request.method)
        raise ApiError("Method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)
    return parse_csv(request)