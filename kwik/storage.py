"""
KWIK - Task File Storage
========================
Loads and saves the task list as a JSON array in a single file
(default: ~/.todos). Every failure here is fatal to the caller.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from .errors import StorageError
from .schema import Task
from .store import TaskStore

logger = logging.getLogger("kwik")

DB_FILE = ".todos"


def default_path() -> Path:
    """~/.todos; raises StorageError when no home directory can be found"""
    try:
        return Path.home() / DB_FILE
    except RuntimeError as e:
        raise StorageError(f"Could not find home directory: {e}") from e


class TaskFile:
    """Single-file JSON persistence for a TaskStore (last write wins)"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path else default_path()

    def load(self) -> TaskStore:
        """Load the store.

        Missing file -> empty store, and the file is created with "[]".
        Empty or whitespace-only file -> empty store, file left as is.
        """
        if not self.path.exists():
            self._write("[]")
            logger.info(f"📄 Created task file: {self.path}")
            return TaskStore()

        try:
            contents = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StorageError(f"Malformed task file {self.path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        if not contents.strip():
            logger.info(f"📂 Task file is empty: {self.path}")
            return TaskStore()

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise StorageError(f"Malformed task file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise StorageError(f"Malformed task file {self.path}: expected a JSON array")

        try:
            tasks = [Task.model_validate(item) for item in data]
        except ValidationError as e:
            raise StorageError(f"Invalid task in {self.path}: {e}") from e

        logger.info(f"📂 Loaded {len(tasks)} tasks from {self.path}")
        return TaskStore(tasks)

    def save(self, store: TaskStore) -> None:
        """Overwrite the file with the store's current contents"""
        self._write(dumps(store.all()))
        logger.debug(f"💾 Saved {len(store)} tasks to {self.path}")

    def _write(self, text: str) -> None:
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e


def dumps(tasks: List[Task]) -> str:
    """Serialize tasks deterministically: same tasks, same bytes"""
    return json.dumps(
        [task.model_dump(mode="json") for task in tasks],
        indent=2,
        ensure_ascii=False,
    )
