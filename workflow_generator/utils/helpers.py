# workflow_generator/utils/helpers.py

import datetime
import re
import textwrap

_UNSAFE_STAMP_CHARS = re.compile(r"[:.]")


def dedent_and_strip(text: str) -> str:
    """
    Cleans up multiline strings by removing indentation and stripping.
    """
    return textwrap.dedent(text).strip()


def iso_timestamp(now: datetime.datetime = None) -> str:
    """
    UTC ISO-8601 with millisecond precision and a trailing 'Z',
    e.g. 2026-10-19T08:15:30.123Z
    """
    dt = (now or datetime.datetime.now(datetime.timezone.utc)).astimezone(datetime.timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def safe_file_stamp(now: datetime.datetime = None) -> str:
    """
    iso_timestamp() with ':' and '.' swapped for '-' so it can sit in a file name.
    """
    return _UNSAFE_STAMP_CHARS.sub("-", iso_timestamp(now))
