from __future__ import annotations

import pytest

from dxfcodec.collection import EntityChain, free_entity
from dxfcodec.entity import Entity
from dxfcodec.errors import DXFPreconditionError
from dxfcodec.registry import new_entity


def _chain(count: int) -> tuple[EntityChain, list[Entity]]:
    chain = EntityChain("POINT")
    entities = []
    for index in range(count):
        entity = new_entity("POINT")
        entity.set("location_x", float(index))
        entities.append(chain.append(entity))
    return chain, entities


def test_append_links_at_tail_in_order() -> None:
    chain, entities = _chain(4)

    assert len(chain) == 4
    assert chain.first is entities[0]
    assert chain.last is entities[-1]
    assert list(chain) == entities
    steps = 0
    node = chain.first
    while node.next is not None:
        node = node.next
        steps += 1
    assert steps == 3


def test_empty_chain() -> None:
    chain = EntityChain("LINE")

    assert not chain
    assert list(chain) == []
    assert chain.first is None and chain.last is None


def test_append_rejects_other_types_and_linked_records() -> None:
    chain, entities = _chain(1)

    with pytest.raises(DXFPreconditionError):
        chain.append(new_entity("LINE"))
    with pytest.raises(DXFPreconditionError):
        chain.append(entities[0])
    with pytest.raises(DXFPreconditionError):
        EntityChain("POINT").append(entities[0])


@pytest.mark.parametrize("index", [0, 1, 2])
def test_remove_unlinks_node(index: int) -> None:
    chain, entities = _chain(3)
    target = entities[index]

    removed = chain.remove(target)

    assert removed is target
    assert target.next is None
    assert target.chain is None
    assert list(chain) == [entity for entity in entities if entity is not target]
    assert chain.first is list(chain)[0]
    assert chain.last is list(chain)[-1]
    assert chain.last.next is None
    assert len(chain) == 2


def test_remove_requires_membership() -> None:
    chain, _ = _chain(1)

    with pytest.raises(DXFPreconditionError):
        chain.remove(new_entity("POINT"))


def test_free_refuses_linked_record() -> None:
    chain, entities = _chain(2)

    with pytest.raises(DXFPreconditionError):
        free_entity(entities[0])
    with pytest.raises(DXFPreconditionError):
        free_entity(entities[1])


def test_free_after_remove_releases_fields() -> None:
    chain, entities = _chain(2)
    entity = chain.remove(entities[0])

    free_entity(entity)

    assert entity.dxf == {}
    assert entity.xdata == []


def test_clear_unlinks_every_node_before_release() -> None:
    chain, entities = _chain(3)

    chain.clear()

    assert len(chain) == 0
    assert chain.first is None
    for entity in entities:
        assert entity.next is None
        assert entity.chain is None
        assert entity.dxf == {}


def test_iteration_survives_removal_of_current_node() -> None:
    chain, entities = _chain(3)

    seen = []
    for entity in chain:
        seen.append(entity)
        chain.remove(entity)

    assert seen == entities
    assert len(chain) == 0
