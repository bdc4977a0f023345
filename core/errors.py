"""Error taxonomy shared by the store, storage adapters and the TUI."""


class ConsistencyError(RuntimeError):
    """Internal invariant failure (unresolvable id, broken project/task link).

    Never a user-facing condition: the UI lets it propagate.
    """


class StorageError(RuntimeError):
    """Persistent storage call failed; the in-memory model was not touched."""


__all__ = ["ConsistencyError", "StorageError"]
