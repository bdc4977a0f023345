from .errors import ConsistencyError, StorageError
from .model import Tag, Project, Task, TagId, ProjectId, TaskId, by_name
from .entity_store import EntityStore
from .selection import SelectionList
from .explorer import ExplorerState, Pane

__all__ = [
    "ConsistencyError",
    "StorageError",
    # Entities
    "Tag",
    "Project",
    "Task",
    "TagId",
    "ProjectId",
    "TaskId",
    "by_name",
    # Projections
    "EntityStore",
    "SelectionList",
    "ExplorerState",
    "Pane",
]
