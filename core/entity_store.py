"""In-memory owner of tags, projects and tasks.

Every mutation validates its preconditions before touching any mapping, so a
failed call leaves the store exactly as it was. Project.tasks and Task.project_id
are kept in lockstep (each task id listed exactly once under its project).
"""

from typing import Dict, Iterable, List, Optional

from .errors import ConsistencyError
from .model import Project, ProjectId, Tag, TagId, Task, TaskId


class EntityStore:
    def __init__(self) -> None:
        self.tags: Dict[TagId, Tag] = {}
        self.projects: Dict[ProjectId, Project] = {}
        self.tasks: Dict[TaskId, Task] = {}

    @classmethod
    def from_snapshot(
        cls,
        tags: Iterable[Tag],
        projects: Iterable[Project],
        tasks: Iterable[Task],
    ) -> "EntityStore":
        """Build a store from a bulk load and verify the project/task links."""
        store = cls()
        for tag in tags:
            store.tags[tag.id] = tag
        for project in projects:
            store.projects[project.id] = project
        for task in tasks:
            store.tasks[task.id] = task
        store.check_consistency()
        return store

    # ---- lookups ----

    def tag(self, tag_id: TagId) -> Tag:
        try:
            return self.tags[tag_id]
        except KeyError:
            raise ConsistencyError(f"unknown tag id {tag_id}") from None

    def project(self, project_id: ProjectId) -> Project:
        try:
            return self.projects[project_id]
        except KeyError:
            raise ConsistencyError(f"unknown project id {project_id}") from None

    def task(self, task_id: TaskId) -> Task:
        try:
            return self.tasks[task_id]
        except KeyError:
            raise ConsistencyError(f"unknown task id {task_id}") from None

    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        return next((t for t in self.tags.values() if t.name == name), None)

    def get_project_by_name(self, name: str) -> Optional[Project]:
        return next((p for p in self.projects.values() if p.name == name), None)

    def project_tasks(self, project_id: ProjectId) -> List[Task]:
        """Tasks listed under a project, in the project's own list order."""
        project = self.project(project_id)
        return [self.task(task_id) for task_id in project.tasks]

    # ---- tags ----

    def add_tag(self, tag: Tag) -> None:
        if tag.id in self.tags:
            raise ConsistencyError(f"duplicate tag id {tag.id}")
        self.tags[tag.id] = tag

    def remove_tag(self, tag_id: TagId) -> None:
        """Drop a tag and scrub it from default tags and task tags."""
        self.tag(tag_id)
        del self.tags[tag_id]
        for project in self.projects.values():
            project.default_tags.discard(tag_id)
        for task in self.tasks.values():
            task.tags.discard(tag_id)

    # ---- projects ----

    def add_project(self, project: Project) -> None:
        if project.id in self.projects:
            raise ConsistencyError(f"duplicate project id {project.id}")
        for task_id in project.tasks:
            task = self.tasks.get(task_id)
            if task is None or task.project_id != project.id:
                raise ConsistencyError(f"project {project.id} lists foreign task {task_id}")
        if len(set(project.tasks)) != len(project.tasks):
            raise ConsistencyError(f"project {project.id} lists a task twice")
        self.projects[project.id] = project

    def remove_project(self, project_id: ProjectId) -> List[TaskId]:
        """Remove a project together with its tasks; returns the removed task ids."""
        project = self.project(project_id)
        removed = list(project.tasks)
        for task_id in removed:
            self.tasks.pop(task_id, None)
        del self.projects[project_id]
        return removed

    # ---- tasks ----

    def add_task(self, task: Task) -> None:
        if task.id in self.tasks:
            raise ConsistencyError(f"duplicate task id {task.id}")
        project = self.projects.get(task.project_id)
        if project is None:
            raise ConsistencyError(f"task {task.id} refers to missing project {task.project_id}")
        self.tasks[task.id] = task
        project.tasks.append(task.id)

    def remove_task(self, task_id: TaskId) -> None:
        task = self.task(task_id)
        project = self.project(task.project_id)
        if task_id not in project.tasks:
            raise ConsistencyError(f"task {task_id} missing from project {project.id} task list")
        project.tasks.remove(task_id)
        del self.tasks[task_id]

    def add_task_tag(self, task_id: TaskId, tag_id: TagId) -> None:
        task = self.task(task_id)
        self.tag(tag_id)
        task.tags.add(tag_id)

    # ---- invariants ----

    def check_consistency(self) -> None:
        seen: Dict[TaskId, ProjectId] = {}
        for project in self.projects.values():
            for task_id in project.tasks:
                if task_id in seen:
                    raise ConsistencyError(f"task {task_id} listed more than once")
                seen[task_id] = project.id
                task = self.tasks.get(task_id)
                if task is None:
                    raise ConsistencyError(f"project {project.id} lists unknown task {task_id}")
                if task.project_id != project.id:
                    raise ConsistencyError(
                        f"task {task_id} listed under project {project.id} but owned by {task.project_id}"
                    )
        for task in self.tasks.values():
            if task.id not in seen:
                raise ConsistencyError(f"task {task.id} is not listed under project {task.project_id}")


__all__ = ["EntityStore"]
