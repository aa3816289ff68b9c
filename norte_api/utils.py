# norte_api/utils.py
"""Shared utilities: logging setup, a retry decorator and numeric coercion."""
import os
import re
import logging
import time
from functools import wraps
from dotenv import load_dotenv

load_dotenv()

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def get_logger(name=__name__):
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("norte-api")

def retry(exceptions, tries=3, delay=1, backoff=2, logger=logger):
    def deco_retry(f):
        @wraps(f)
        def f_retry(*args, **kwargs):
            mtries, mdelay = tries, delay
            while mtries > 1:
                try:
                    return f(*args, **kwargs)
                except exceptions as e:
                    logger.warning("Retryable error: %s, retrying in %s sec", e, mdelay)
                    time.sleep(mdelay)
                    mtries -= 1
                    mdelay *= backoff
            return f(*args, **kwargs)
        return f_retry
    return deco_retry


def to_non_negative_int(value) -> int:
    """Coerce a loosely typed form value to an integer >= 0.

    Strings are read like a browser's ``parseInt``: the leading run of digits
    counts and anything after it (decimals, units, separators) is dropped.
    Unparseable or negative input becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        try:
            number = int(value)
        except (OverflowError, ValueError):
            return 0
    else:
        m = _LEADING_INT.match(str(value))
        if not m:
            return 0
        number = int(m.group(1))
    return number if number > 0 else 0
