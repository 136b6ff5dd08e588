"""Operations on a matrix of CSV records."""

import logging
import math
import os
import time
from concurrent.futures import ThreadPoolExecutor

from csvutility.request import atoi

logger = logging.getLogger(__name__)

SEQUENTIAL_LIMIT = 50


def _to_int(text):
    try:
        return atoi(text)
    except ValueError:
        return 0


def _values(records):
    return (value for row in records for value in row)


def _rows_text(records):
    return "".join(",".join(row) + "\n" for row in records)


def _chunk_sum(records):
    return sum(_to_int(value) for value in _values(records))


def echo(records):
    """Return the records as CSV text, one line per row."""
    return _rows_text(records)


def csv_sum(records):
    """Sum every value, in parallel when there are many rows."""
    if len(records) < SEQUENTIAL_LIMIT:
        return sequential_sum(records)
    return parallel_sum(records)


def sequential_sum(records):
    """Sum every value in one pass."""
    start = time.perf_counter()
    total = _chunk_sum(records)
    logger.info("time elapsed: %.6fs", time.perf_counter() - start)
    return total


def parallel_sum(records, workers=None):
    """Sum every value by splitting the rows among a pool of workers."""
    start = time.perf_counter()
    workers = max(1, workers or os.cpu_count() or 1)
    count = len(records)
    bounds = [(i * count) // workers for i in range(workers + 1)]
    chunks = [records[lo:hi] for lo, hi in zip(bounds, bounds[1:])]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        total = sum(pool.map(_chunk_sum, chunks))
    logger.info("time elapsed: %.6fs", time.perf_counter() - start)
    return total


def multiply(records):
    """Return the product of every value."""
    return math.prod(_to_int(value) for value in _values(records))


def invert(records):
    """Return the transposed matrix as CSV text."""
    return _rows_text([list(column) for column in zip(*records)])


def flatten(records):
    """Return every value on one line, row after row, separated by commas."""
    return ",".join(_values(records))