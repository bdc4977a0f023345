from core import EntityStore, ExplorerState, Pane, Project, Task


def _names(store, ids, kind):
    lookup = store.project if kind == "project" else store.task
    return [lookup(i).name for i in ids]


def test_empty_store_has_no_task_list():
    explorer = ExplorerState()
    explorer.sync(EntityStore())
    assert explorer.projects.items == []
    assert explorer.tasks is None


def test_projects_sorted_by_name_first_selected():
    store = EntityStore()
    store.add_project(Project(1, "Beta"))
    store.add_project(Project(2, "Alpha"))
    explorer = ExplorerState()

    explorer.sync(store)

    assert _names(store, explorer.projects.items, "project") == ["Alpha", "Beta"]
    assert explorer.projects.selected == 0
    assert explorer.tasks is not None and explorer.tasks.items == []


def test_task_list_tracks_selected_project():
    store = EntityStore()
    store.add_project(Project(1, "Alpha"))
    store.add_project(Project(2, "Beta"))
    store.add_task(Task(10, 1, "b-task"))
    store.add_task(Task(11, 1, "a-task"))
    store.add_task(Task(12, 2, "beta-task"))
    explorer = ExplorerState()
    explorer.sync(store)

    assert explorer.tasks.items == [11, 10]

    explorer.navigate(1, store)
    assert explorer.projects.selected_id() == 2
    assert explorer.tasks.items == [12]

    explorer.navigate(-1, store)
    assert explorer.tasks.items == [11, 10]
    assert explorer.tasks.selected == 0


def test_task_selection_kept_on_resync_of_same_project():
    store = EntityStore()
    store.add_project(Project(1, "P"))
    store.add_task(Task(10, 1, "b"))
    store.add_task(Task(11, 1, "c"))
    explorer = ExplorerState()
    explorer.sync(store)
    explorer.set_collapsed(True)
    explorer.navigate(1, store)
    assert explorer.tasks.selected_id() == 11

    store.add_task(Task(12, 1, "a"))
    explorer.sync(store)

    assert explorer.tasks.items == [12, 10, 11]
    assert explorer.tasks.selected_id() == 11


def test_deleting_selected_task_falls_back_to_first():
    store = EntityStore()
    store.add_project(Project(1, "P"))
    store.add_task(Task(10, 1, "T1"))
    store.add_task(Task(11, 1, "T2"))
    explorer = ExplorerState()
    explorer.sync(store)
    assert explorer.tasks.selected_id() == 10

    store.remove_task(10)
    explorer.sync(store)

    assert explorer.tasks.items == [11]
    assert explorer.tasks.selected == 0


def test_deleting_last_project_drops_task_list():
    store = EntityStore()
    store.add_project(Project(1, "Only"))
    explorer = ExplorerState()
    explorer.sync(store)

    store.remove_project(1)
    explorer.sync(store)

    assert explorer.projects.items == []
    assert explorer.tasks is None


def test_collapse_moves_focus_and_navigation_target():
    store = EntityStore()
    store.add_project(Project(1, "A"))
    store.add_project(Project(2, "B"))
    store.add_task(Task(10, 1, "x"))
    store.add_task(Task(11, 1, "y"))
    explorer = ExplorerState()
    explorer.sync(store)
    assert explorer.focus is Pane.EXPLORER

    explorer.set_collapsed(True)
    assert explorer.focus is Pane.MAIN
    explorer.navigate(1, store)

    assert explorer.projects.selected_id() == 1
    assert explorer.tasks.selected_id() == 11


def test_selected_entities_resolve_through_store():
    store = EntityStore()
    store.add_project(Project(1, "A"))
    store.add_task(Task(10, 1, "x"))
    explorer = ExplorerState()
    explorer.sync(store)

    assert explorer.selected_project(store).name == "A"
    assert explorer.selected_task(store).name == "x"
