from __future__ import annotations

from typing import Any, Iterable

from esper import World


def delete_entities(world: World, entities: Iterable[int]) -> None:
    for entity in list(entities):
        try:
            world.delete_entity(entity, immediate=True)
        except KeyError:
            continue


def entities_with(world: World, component_type: type[Any]) -> list[int]:
    return [entity for entity, _ in world.get_component(component_type)]
