from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ListLike[T](Protocol):
    def __getitem__(self, idx: int) -> T: ...
    def __len__(self) -> int: ...


def is_list_like(obj: Any) -> bool:
    """
    True for anything sized and integer-indexable (list, tuple, str, range,
    numpy arrays, ...). Mappings are rejected: their keys are not positions.
    """
    if isinstance(obj, Mapping):
        return False
    return isinstance(obj, ListLike)


# a cursor is a position within one borrowed sequence, in [0, len]
Cursor = int
CursorTuple = tuple[Cursor, ...]
