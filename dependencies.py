# dependencies.py
import re
from typing import Optional

from fastapi import Request

from storage import TaskStore

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def get_task_store(request: Request) -> TaskStore:
    """
    Returns the store the application was built with.
    Tests swap it out through app.dependency_overrides.
    """
    return request.app.state.task_store


def parse_task_id(raw: str) -> Optional[int]:
    """
    Reads the leading integer of a path segment, the way "12abc" reads as 12.
    Returns None when the segment does not start with a number.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))
