# storage.py
import json
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from logging_config import get_logger

logger = get_logger(__name__)


class StoreStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    UNREADABLE = "unreadable"


class LoadResult(NamedTuple):
    tasks: List[Dict]
    status: StoreStatus


class TaskStore:
    """
    The whole task list, kept as one JSON array in a single file.

    Every call goes to disk: nothing is cached between requests. Reads never
    fail the caller; a missing or broken file reads as an empty list.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> LoadResult:
        if not self.path.exists():
            return LoadResult([], StoreStatus.MISSING)
        # TODO: lock the file when running with several uvicorn workers, reads and writes interleave across processes
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read tasks from {self.path}: {e}")
            return LoadResult([], StoreStatus.UNREADABLE)
        if not isinstance(data, list):
            logger.warning(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
            return LoadResult([], StoreStatus.UNREADABLE)
        if not all(isinstance(task, dict) for task in data):
            logger.warning(f"Expected only task objects in {self.path}")
            return LoadResult([], StoreStatus.UNREADABLE)
        return LoadResult(data, StoreStatus.OK)

    def load_all(self) -> List[Dict]:
        return self.load().tasks

    def save_all(self, tasks: List[Dict]):
        """Replaces the file with the given list in a single rename."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(tasks, f, indent=4, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def initialize(self):
        if not self.path.exists():
            self.save_all([])
            logger.info(f"Created empty task store at {self.path}")


def next_id(tasks: List[Dict]) -> int:
    """1 for an empty list, otherwise one past the highest integer id."""
    ids = [task.get("id") for task in tasks]
    return max((i for i in ids if isinstance(i, int) and not isinstance(i, bool)), default=0) + 1


def find_task(tasks: List[Dict], task_id: int) -> Optional[Dict]:
    return next((t for t in tasks if t.get("id") == task_id), None)
