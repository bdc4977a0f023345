"""Store + storage + explorer, with the single mutator for deferred commands."""

import logging

from core import ConsistencyError, EntityStore, ExplorerState, StorageError
from application.commands import (
    Command,
    CreateProject,
    CreateTag,
    CreateTask,
    DeleteProject,
    DeleteTag,
    DeleteTask,
    TagTask,
)
from application.ports import Storage

logger = logging.getLogger("taskpane.workspace")


class Workspace:
    def __init__(self, storage: Storage, store: EntityStore, explorer: ExplorerState | None = None):
        self.storage = storage
        self.store = store
        self.explorer = explorer or ExplorerState()
        self.sync()

    @classmethod
    def load(cls, storage: Storage) -> "Workspace":
        try:
            tags, projects, tasks = storage.load_all()
            store = EntityStore.from_snapshot(tags, projects, tasks)
        except (StorageError, ConsistencyError):
            storage.close()
            raise
        logger.info("loaded tags=%s projects=%s tasks=%s", len(store.tags), len(store.projects), len(store.tasks))
        return cls(storage, store)

    def sync(self) -> None:
        self.explorer.sync(self.store)

    def apply(self, command: Command) -> None:
        """Persist first, then mutate the store, then resync the projections.

        A StorageError from the persistence call propagates before any
        in-memory state changes.
        """
        storage, store = self.storage, self.store
        if isinstance(command, CreateTag):
            store.add_tag(storage.create_tag(command.name))
        elif isinstance(command, DeleteTag):
            store.tag(command.tag_id)
            storage.delete_tag(command.tag_id)
            store.remove_tag(command.tag_id)
        elif isinstance(command, CreateProject):
            store.add_project(storage.create_project(command.name))
        elif isinstance(command, DeleteProject):
            store.project(command.project_id)
            storage.delete_project(command.project_id)
            if self.explorer.projects.selected_id() == command.project_id:
                self.explorer.step_back_project()
            store.remove_project(command.project_id)
        elif isinstance(command, CreateTask):
            store.project(command.project_id)
            store.add_task(storage.create_task(command.project_id, command.name))
        elif isinstance(command, DeleteTask):
            store.task(command.task_id)
            storage.delete_task(command.task_id)
            store.remove_task(command.task_id)
        elif isinstance(command, TagTask):
            if command.tag_id is None:
                raise ValueError("TagTask needs a tag id")
            store.task(command.task_id)
            store.tag(command.tag_id)
            storage.tag_task(command.task_id, command.tag_id)
            store.add_task_tag(command.task_id, command.tag_id)
        else:
            raise TypeError(f"unsupported command: {command!r}")
        logger.debug("applied %r", command)
        self.sync()

    def close(self) -> None:
        self.storage.close()


__all__ = ["Workspace"]
