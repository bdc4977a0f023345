"""Project/task explorer projections and the cascade between them."""

from enum import Enum
from typing import Optional

from .entity_store import EntityStore
from .model import Project, ProjectId, Task, TaskId, by_name
from .selection import SelectionList


class Pane(Enum):
    EXPLORER = "explorer"
    MAIN = "main"


class ExplorerState:
    """Project list plus the task list of the selected project.

    ``tasks`` is None exactly when no project is selected. ``collapsed`` only
    decides which list receives navigation keys.
    """

    def __init__(self) -> None:
        self.projects: SelectionList[ProjectId] = SelectionList()
        self.tasks: Optional[SelectionList[TaskId]] = None
        self.collapsed: bool = False
        self._tasks_owner: Optional[ProjectId] = None

    @property
    def focus(self) -> Pane:
        return Pane.MAIN if self.collapsed else Pane.EXPLORER

    def sync(self, store: EntityStore) -> None:
        self.projects.sync_and_sort(store.projects.values(), by_name)
        self.project_changed(store)

    def project_changed(self, store: EntityStore) -> None:
        project_id = self.projects.selected_id()
        if project_id is None:
            self.tasks = None
            self._tasks_owner = None
            return
        # Same project: keep the highlighted task by id. New project: start at the top.
        if self.tasks is None or self._tasks_owner != project_id:
            self.tasks = SelectionList()
        self._tasks_owner = project_id
        self.tasks.sync_and_sort(store.project_tasks(project_id), by_name)

    def navigate(self, delta: int, store: EntityStore) -> None:
        if self.focus is Pane.MAIN:
            if self.tasks is not None:
                _step(self.tasks, delta)
            return
        _step(self.projects, delta)
        self.project_changed(store)

    def step_back_project(self) -> None:
        """Move the project cursor up one row ahead of deleting the selected project."""
        self.projects.previous()

    def set_collapsed(self, collapsed: bool) -> None:
        self.collapsed = collapsed

    def selected_project(self, store: EntityStore) -> Optional[Project]:
        return self.projects.resolve(store.project)

    def selected_task(self, store: EntityStore) -> Optional[Task]:
        if self.tasks is None:
            return None
        return self.tasks.resolve(store.task)


def _step(selection: SelectionList, delta: int) -> None:
    if delta < 0:
        for _ in range(-delta):
            selection.previous()
    else:
        for _ in range(delta):
            selection.next()


__all__ = ["ExplorerState", "Pane"]
