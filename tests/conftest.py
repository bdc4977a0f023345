from __future__ import annotations

import pytest

from core import Project, Tag, Task
from application.workspace import Workspace

from fakes import FakeStorage


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def seeded_storage() -> FakeStorage:
    """Projects Beta(1) and Alpha(2); Alpha owns T2(11) and T1(10); tags urgent/home."""
    return FakeStorage(
        tags=[Tag(1, "urgent"), Tag(2, "home")],
        projects=[
            Project(1, "Beta"),
            Project(2, "Alpha", tasks=[11, 10]),
        ],
        tasks=[
            Task(11, 2, "T2"),
            Task(10, 2, "T1"),
        ],
    )


@pytest.fixture()
def workspace(storage: FakeStorage) -> Workspace:
    return Workspace.load(storage)


@pytest.fixture()
def seeded(seeded_storage: FakeStorage) -> Workspace:
    return Workspace.load(seeded_storage)
