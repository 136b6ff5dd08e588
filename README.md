# csvutility

csvutility is a small HTTP service for square matrices of integers sent as CSV
files. Upload a file and the service returns it echoed, inverted (transposed)
or flattened, or returns the sum or product of all its cells.

## Installation

```
pip install csvutility
```

## Running the server

```
csvserver --host localhost --port 8080
```

The options may also be written with a single dash (`-host`, `-port`). By
default the server listens on `localhost:8080`. It is served by Werkzeug's
development server. If the port is not a number or the server cannot bind,
the command logs the error and exits with status 1.

## Endpoints

Every endpoint takes a `POST` request with a multipart form upload in the
field `file`. All endpoints are under `/api/v1`. Successful replies have
status 200 and a `text/plain` body.

| Endpoint            | Result                                         |
|---------------------|------------------------------------------------|
| `/api/v1/echo`      | The matrix as it was sent, one row per line    |
| `/api/v1/invert`    | The matrix transposed, one row per line        |
| `/api/v1/flatten`   | All cells on one line, separated by commas     |
| `/api/v1/sum`       | The sum of all cells                           |
| `/api/v1/multiply`  | The product of all cells                       |

Given `matrix.csv`:

```
1,2,3
4,5,6
7,8,9
```

```
curl -F file=@matrix.csv http://localhost:8080/api/v1/invert
1,4,7
2,5,8
3,6,9
```

Each cell must be a decimal integer that fits in 64 bits, with an optional
sign. Sums and products are computed exactly, with no limit on the size of the
result. Sums over 50 rows or more are split among a pool of worker threads.

## Errors

The server replies with status 400 and a JSON body when the upload is not a
multipart form, has no `file` field, is not valid CSV, has rows of unequal
width, is empty, is not square, or has a cell that is not an integer:

```json
{"message":"given file has no content","status_code":400}
```

Requests with a method other than `POST`, and requests to any other path, get
a `404 page not found` reply.

## Using it as a library

`csvutility.app.create_app()` returns a WSGI application that you can serve
with any WSGI server; `csvutility.app.csv_operation()` turns a function on
records into a request handler with the same error handling.

The operations are plain functions on lists of rows in
`csvutility.operations`: `echo`, `invert`, `flatten`, `csv_sum`,
`sequential_sum`, `parallel_sum` and `multiply`. Parsing and validation are in
`csvutility.request`: `read_csv`, `validate_csv`,
`validate_csv_on_row_col_size`, `validate_csv_cell_value` and `atoi`, which
raise `ValueError`. Errors sent to clients are `csvutility.errors.ApiError`.

```python
from csvutility.operations import csv_sum, invert
from csvutility.request import read_csv, validate_csv

records = read_csv(b"1,2\n3,4\n")
validate_csv(records)
print(csv_sum(records))   # 10
print(invert(records))    # "1,3\n2,4\n"
```