from __future__ import annotations

from typing import Iterator

from .entity import Entity
from .errors import DXFPreconditionError


def free_entity(entity: Entity) -> None:
    """Release a record's field storage.

    A record still pointing at a successor is refused: something may still
    be walking the chain through it.
    """
    if entity is None:
        raise DXFPreconditionError("cannot free a missing entity")
    if entity.next is not None:
        raise DXFPreconditionError(
            f"pointer to next {entity.dxftype} entity was not None; unlink it before freeing"
        )
    if entity.chain is not None:
        raise DXFPreconditionError(f"{entity.dxftype} entity is still owned by a chain")
    entity.dxf.clear()
    entity.xdata.clear()
    entity.subclasses.clear()


class EntityChain:
    """Singly linked records of one type, in document order."""

    def __init__(self, dxftype: str) -> None:
        self.dxftype = dxftype
        self.first: Entity | None = None
        self.last: Entity | None = None
        self._size = 0

    def __repr__(self) -> str:
        return f"EntityChain({self.dxftype!r}, {self._size} entities)"

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Entity]:
        node = self.first
        while node is not None:
            following = node.next
            yield node
            node = following

    def append(self, entity: Entity) -> Entity:
        if entity is None:
            raise DXFPreconditionError("cannot append a missing entity")
        if entity.dxftype != self.dxftype:
            raise DXFPreconditionError(
                f"cannot append {entity.dxftype} to a chain of {self.dxftype}"
            )
        if entity.chain is not None or entity.next is not None:
            raise DXFPreconditionError(f"{entity.dxftype} entity is already linked")
        if self.last is None:
            self.first = entity
        else:
            self.last.next = entity
        self.last = entity
        entity.chain = self
        self._size += 1
        return entity

    def extend(self, entities) -> None:
        for entity in entities:
            self.append(entity)

    def remove(self, entity: Entity) -> Entity:
        if entity is None or entity.chain is not self:
            raise DXFPreconditionError("entity is not part of this chain")
        previous: Entity | None = None
        node = self.first
        while node is not entity:
            previous = node
            node = node.next
        if previous is None:
            self.first = entity.next
        else:
            previous.next = entity.next
        if self.last is entity:
            self.last = previous
        entity.next = None
        entity.chain = None
        self._size -= 1
        return entity

    def clear(self) -> None:
        node = self.first
        self.first = None
        self.last = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            node.chain = None
            free_entity(node)
            node = following
