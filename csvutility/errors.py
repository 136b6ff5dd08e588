"""Errors that carry an HTTP status and a JSON body."""

import json

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

_JSON_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class ApiError(Exception):
    """An error reported to the client with a status code and a JSON message."""

    def __init__(self, message, status_code, cause=None):
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return self.message
        return str(self.cause)

    def error_message(self):
        """Return the JSON body describing this error, as bytes."""
        text = json.dumps(
            {"message": self.message, "status_code": self.status_code},
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return text.translate(_JSON_HTML_ESCAPES).encode("utf-8")

    def error_status_code(self):
        """Return the status code and the response headers for this error."""
        return self.status_code, {"Content-Type": JSON_CONTENT_TYPE}