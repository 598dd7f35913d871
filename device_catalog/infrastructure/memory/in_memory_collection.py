"""Insertion-ordered, key-indexed storage for one entity kind."""
# Standard library imports
import itertools
import logging
from bisect import insort
from typing import Callable, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class InMemoryCollection(Generic[EntityT]):
    """
    Ordered collection with a key index.

    Every stored entity gets a monotonically increasing slot number. ``_entries``
    maps slot -> entity (dict order is insertion order, and overwriting a slot
    keeps its position). ``_index`` maps key -> sorted slots carrying that key,
    so duplicate keys are supported and "first match" is always ``slots[0]``.

    Filtering goes through ``accessors``: an explicit mapping of filterable
    field name -> function returning the field's string value. A filter on a
    field absent from the mapping matches nothing.
    """

    def __init__(
        self,
        key_of: Callable[[EntityT], str],
        accessors: Mapping[str, Callable[[EntityT], str]],
        initial: Iterable[EntityT] = (),
    ) -> None:
        self._key_of = key_of
        self._accessors = dict(accessors)
        self._entries: Dict[int, EntityT] = {}
        self._index: Dict[str, List[int]] = {}
        self._slots = itertools.count()
        for entity in initial:
            self.append(entity)

    def __len__(self) -> int:
        return len(self._entries)

    def values(self) -> List[EntityT]:
        return list(self._entries.values())

    def matching(self, filters: Optional[Mapping[str, str]] = None) -> List[EntityT]:
        """Return entities whose filterable fields equal every supplied value"""
        if not filters:
            return self.values()

        checks = []
        for field, expected in filters.items():
            accessor = self._accessors.get(field)
            if accessor is None:
                logger.debug(f"Unknown filter field '{field}', no entity can match")
                return []
            checks.append((accessor, str(expected)))

        return [
            entity
            for entity in self._entries.values()
            if all(accessor(entity) == expected for accessor, expected in checks)
        ]

    def first(self, key: str) -> Optional[EntityT]:
        slots = self._index.get(key)
        if not slots:
            return None
        return self._entries[slots[0]]

    def append(self, entity: EntityT) -> None:
        slot = next(self._slots)
        self._entries[slot] = entity
        self._index.setdefault(self._key_of(entity), []).append(slot)

    def replace_first(self, key: str, entity: EntityT) -> bool:
        slots = self._index.get(key)
        if not slots:
            return False

        slot = slots[0]
        new_key = self._key_of(entity)
        if new_key != key:
            self._unindex(key, slot)
            insort(self._index.setdefault(new_key, []), slot)
        self._entries[slot] = entity
        return True

    def remove_first(self, key: str) -> bool:
        slots = self._index.get(key)
        if not slots:
            return False

        slot = slots[0]
        self._unindex(key, slot)
        del self._entries[slot]
        return True

    def _unindex(self, key: str, slot: int) -> None:
        slots = self._index[key]
        slots.remove(slot)
        if not slots:
            del self._index[key]
