"""Helpers for id-addressed tuples of frozen entities."""

from dataclasses import fields, replace
from typing import Any, Mapping, Sequence, Tuple, TypeVar

from bookish.core import DuplicateEntityError, EntityNotFoundError, InvalidActionError

T = TypeVar("T")


def index_of(items: Sequence[T], entity_id: str, entity: str) -> int:
    """Return the position of the item with ``entity_id``.

    Raises:
        EntityNotFoundError: if no item carries that id.
    """
    for index, item in enumerate(items):
        if item.id == entity_id:
            return index
    raise EntityNotFoundError(entity, entity_id)


def contains_id(items: Sequence[Any], entity_id: str) -> bool:
    return any(item.id == entity_id for item in items)


def ensure_new_id(items: Sequence[Any], entity_id: str, entity: str) -> None:
    if contains_id(items, entity_id):
        raise DuplicateEntityError(entity, entity_id)


def replace_at(items: Tuple[T, ...], index: int, item: T) -> Tuple[T, ...]:
    return items[:index] + (item,) + items[index + 1:]


def merge_fields(item: T, changes: Mapping[str, Any], entity: str) -> T:
    """Apply a partial update to a frozen dataclass, rejecting unknown names and id changes."""
    known = {f.name for f in fields(item)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise InvalidActionError(f"Unknown {entity} field(s): {', '.join(unknown)}")
    if "id" in changes and changes["id"] != item.id:
        raise InvalidActionError(f"{entity} id cannot be changed")
    return replace(item, **changes)
