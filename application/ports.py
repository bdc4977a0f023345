from typing import Protocol, List, Tuple

from core import Project, ProjectId, Tag, TagId, Task, TaskId


class Storage(Protocol):
    """Blocking persistence collaborator; failures raise core.StorageError."""

    def create_tag(self, name: str) -> Tag:
        ...

    def delete_tag(self, tag_id: TagId) -> None:
        ...

    def create_project(self, name: str) -> Project:
        ...

    def delete_project(self, project_id: ProjectId) -> None:
        ...

    def create_task(self, project_id: ProjectId, name: str) -> Task:
        ...

    def delete_task(self, task_id: TaskId) -> None:
        ...

    def tag_task(self, task_id: TaskId, tag_id: TagId) -> None:
        ...

    def load_all(self) -> Tuple[List[Tag], List[Project], List[Task]]:
        ...

    def close(self) -> None:
        ...
