"""Id projection with a selection cursor that survives re-sorting."""

from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

IdT = TypeVar("IdT")


class SelectionList(Generic[IdT]):
    """Ordered ids plus a cursor.

    Position is never identity: after every rebuild the cursor is re-derived
    from the id that was selected before. Empty lists keep ``selected == 0``.
    """

    def __init__(self, items: Optional[List[IdT]] = None, selected: int = 0):
        self.items: List[IdT] = list(items or [])
        self.selected = min(max(selected, 0), len(self.items) - 1) if self.items else 0

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __repr__(self) -> str:
        return f"SelectionList(items={self.items!r}, selected={self.selected})"

    def previous(self) -> None:
        if self.selected > 0:
            self.selected -= 1

    def next(self) -> None:
        if self.selected + 1 < len(self.items):
            self.selected += 1

    def selected_id(self) -> Optional[IdT]:
        if not self.items:
            return None
        return self.items[self.selected]

    def resolve(self, lookup: Callable[[IdT], Any]) -> Optional[Any]:
        selected = self.selected_id()
        return None if selected is None else lookup(selected)

    def sync_and_sort(
        self,
        entities: Iterable[Any],
        sort_key: Callable[[Any], Any],
        id_of: Callable[[Any], IdT] = lambda entity: entity.id,
    ) -> None:
        previous = self.selected_id()
        # sorted() is stable: equal keys keep the caller's enumeration order.
        self.items = [id_of(entity) for entity in sorted(entities, key=sort_key)]
        if previous is not None and previous in self.items:
            self.selected = self.items.index(previous)
        else:
            self.selected = 0

    def position_label(self) -> str:
        total = len(self.items)
        return f"{min(self.selected + 1, total)} of {total}"


__all__ = ["SelectionList"]
