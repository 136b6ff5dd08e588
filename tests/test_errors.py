import json

from csvutility.errors import ApiError


def test_str_is_message_without_cause():
    err = ApiError("Method not allowed", 405)
    assert str(err) == "Method not allowed"


def test_str_is_cause_when_present():
    err = ApiError("other", 400, cause=ValueError("boom"))
    assert str(err) == "boom"
    assert err.message == "other"


def test_error_message_pinned_bytes():
    err = ApiError("Method not allowed", 405)
    assert err.error_message() == b'{"message":"Method not allowed","status_code":405}'


def test_error_message_round_trip():
    err = ApiError("given file has no content", 400)
    decoded = json.loads(err.error_message())
    assert decoded == {"message": "given file has no content", "status_code": 400}


def test_error_message_escapes_html_characters():
    err = ApiError("<a&b>", 400)
    body = err.error_message()
    assert b"\\u003ca\\u0026b\\u003e" in body
    assert json.loads(body)["message"] == "<a&b>"


def test_error_status_code_has_json_content_type():
    err = ApiError("bad", 400)
    assert err.error_status_code() == (
        400,
        {"Content-Type": "application/json; charset=utf-8"},
    )


def test_error_with_cause_serializes_message_and_status_only():
    err = ApiError("cell(0, 1) value is not an integer", 400, cause=ValueError("bad cell"))
    status, headers = err.error_status_code()
    assert status == 400
    assert headers == {"Content-Type": "application/json; charset=utf-8"}
    assert json.loads(err.error_message()) == {
        "message": "cell(0, 1) value is not an integer",
        "status_code": 400,
    }
    assert str(err) == "bad cell"