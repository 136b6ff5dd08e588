"""HTTP server exposing the CSV matrix operations."""

import argparse
import functools
import logging
from http import HTTPStatus

from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from csvutility.errors import JSON_CONTENT_TYPE, ApiError
from csvutility.operations import csv_sum, echo, flatten, invert, multiply
from csvutility.request import get_csv_content

logger = logging.getLogger(__name__)

API_V1 = "/api/v1"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = "8080"

OPERATIONS = {
    "/echo": echo,
    "/invert": invert,
    "/flatten": flatten,
    "/sum": csv_sum,
    "/multiply": multiply,
}


def csv_operation(operation):
    """Turn an operation on records into a request handler with error handling."""

    @functools.wraps(operation)
    def handler(request):
        try:
            records = get_csv_content(request)
            result = operation(records)
        except ApiError as err:
            logger.error(
                "error occurred while processing the endpoint %s: %s", request.full_path, err
            )
            status, headers = err.error_status_code()
            return Response(err.error_message(), status=status, headers=headers)
        except Exception as err:
            logger.exception(
                "error occurred while processing the endpoint %s", request.full_path
            )
            return Response(
                str(err),
                status=HTTPStatus.INTERNAL_SERVER_ERROR,
                content_type=JSON_CONTENT_TYPE,
            )
        return Response(str(result), status=HTTPStatus.OK, mimetype="text/plain")

    return handler


def create_app():
    """Return the WSGI application serving every operation under the v1 prefix."""
    routes = {API_V1 + path: csv_operation(op) for path, op in OPERATIONS.items()}

    @Request.application
    def app(request):
        handler = routes.get(request.path)
        if handler is None or request.method != "POST":
            return Response(
                "404 page not found\n", status=HTTPStatus.NOT_FOUND, mimetype="text/plain"
            )
        return handler(request)

    return app


def main(argv=None):
    """Start the server; return a non-zero status if it cannot start."""
    parser = argparse.ArgumentParser(prog="csvserver", description="CSV matrix server")
    parser.add_argument("-host", "--host", default=DEFAULT_HOST, help="host address")
    parser.add_argument("-port", "--port", default=DEFAULT_PORT, help="port number")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )

    try:
        port = int(args.port)
    except ValueError:
        logger.critical("Error starting server: invalid port %r", args.port)
        return 1

    logger.info("Server started on port %s", args.port)
    try:
        run_simple(args.host, port, create_app())
    except OSError as err:
        logger.critical("Error starting server: %s", err)
        return 1
    logger.info("Server stopped on port %s", args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())