"""SQLite storage for tags, projects and tasks.

One connection per session (the TUI is single-threaded). The schema is created
with ``CREATE TABLE IF NOT EXISTS`` on open; association tables cascade on
delete so removing a project or tag cleans up its rows.
"""

import contextlib
import logging
import sqlite3
from pathlib import Path
from typing import Dict, Iterator, List, Set, Tuple

from core import Project, ProjectId, StorageError, Tag, TagId, Task, TaskId

logger = logging.getLogger("taskpane.storage")

SCHEMA = """
CREATE TABLE IF NOT EXISTS Tag (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS Project (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS Task (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    project_id INTEGER NOT NULL REFERENCES Project(id) ON DELETE CASCADE,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS DefaultTags (
    project_id INTEGER NOT NULL REFERENCES Project(id) ON DELETE CASCADE,
    tag_id INTEGER NOT NULL REFERENCES Tag(id) ON DELETE CASCADE,
    PRIMARY KEY (project_id, tag_id)
);
CREATE TABLE IF NOT EXISTS TaskTags (
    task_id INTEGER NOT NULL REFERENCES Task(id) ON DELETE CASCADE,
    tag_id INTEGER NOT NULL REFERENCES Tag(id) ON DELETE CASCADE,
    PRIMARY KEY (task_id, tag_id)
);
"""


class SqliteStorage:
    def __init__(self, db_path: str | Path = "local.db") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(str(self._db_path))
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open {self._db_path}: {exc}") from exc
        try:
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
            self._conn.executescript(SCHEMA)
        except sqlite3.Error as exc:
            self.close()
            raise StorageError(f"cannot open {self._db_path}: {exc}") from exc
        logger.info("SqliteStorage ready db=%s", self._db_path)

    def close(self) -> None:
        with contextlib.suppress(sqlite3.Error):
            self._conn.close()

    @contextlib.contextmanager
    def _write(self, what: str) -> Iterator[sqlite3.Connection]:
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as exc:
            logger.warning("storage %s failed: %s", what, exc)
            raise StorageError(f"{what} failed: {exc}") from exc

    # ---- tags ----

    def create_tag(self, name: str) -> Tag:
        with self._write("create tag") as conn:
            cur = conn.execute("INSERT INTO Tag (name) VALUES (?)", (name,))
        return Tag(id=int(cur.lastrowid), name=name)

    def delete_tag(self, tag_id: TagId) -> None:
        with self._write("delete tag") as conn:
            conn.execute("DELETE FROM Tag WHERE id = ?", (tag_id,))

    # ---- projects ----

    def create_project(self, name: str) -> Project:
        with self._write("create project") as conn:
            cur = conn.execute("INSERT INTO Project (name) VALUES (?)", (name,))
        return Project(id=int(cur.lastrowid), name=name)

    def delete_project(self, project_id: ProjectId) -> None:
        with self._write("delete project") as conn:
            conn.execute("DELETE FROM Project WHERE id = ?", (project_id,))

    # ---- tasks ----

    def create_task(self, project_id: ProjectId, name: str) -> Task:
        with self._write("create task") as conn:
            cur = conn.execute(
                "INSERT INTO Task (project_id, name) VALUES (?, ?)",
                (project_id, name),
            )
        return Task(id=int(cur.lastrowid), project_id=project_id, name=name)

    def delete_task(self, task_id: TaskId) -> None:
        with self._write("delete task") as conn:
            conn.execute("DELETE FROM Task WHERE id = ?", (task_id,))

    def tag_task(self, task_id: TaskId, tag_id: TagId) -> None:
        with self._write("tag task") as conn:
            conn.execute(
                "INSERT OR IGNORE INTO TaskTags (task_id, tag_id) VALUES (?, ?)",
                (task_id, tag_id),
            )

    # ---- bulk load ----

    def load_all(self) -> Tuple[List[Tag], List[Project], List[Task]]:
        try:
            conn = self._conn
            tags = [Tag(id=row["id"], name=row["name"]) for row in conn.execute("SELECT id, name FROM Tag")]

            default_tags: Dict[ProjectId, Set[TagId]] = {}
            for row in conn.execute("SELECT project_id, tag_id FROM DefaultTags"):
                default_tags.setdefault(row["project_id"], set()).add(row["tag_id"])

            task_tags: Dict[TaskId, Set[TagId]] = {}
            for row in conn.execute("SELECT task_id, tag_id FROM TaskTags"):
                task_tags.setdefault(row["task_id"], set()).add(row["tag_id"])

            tasks: List[Task] = []
            project_tasks: Dict[ProjectId, List[TaskId]] = {}
            for row in conn.execute("SELECT id, project_id, name FROM Task ORDER BY id"):
                tasks.append(
                    Task(
                        id=row["id"],
                        project_id=row["project_id"],
                        name=row["name"],
                        tags=task_tags.get(row["id"], set()),
                    )
                )
                project_tasks.setdefault(row["project_id"], []).append(row["id"])

            projects = [
                Project(
                    id=row["id"],
                    name=row["name"],
                    default_tags=default_tags.get(row["id"], set()),
                    tasks=project_tasks.get(row["id"], []),
                )
                for row in conn.execute("SELECT id, name FROM Project")
            ]
        except sqlite3.Error as exc:
            raise StorageError(f"load failed: {exc}") from exc
        return tags, projects, tasks


__all__ = ["SqliteStorage", "SCHEMA"]
