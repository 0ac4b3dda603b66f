"""Declarative field tables that drive the generic decoder and encoder.

An :class:`EntitySchema` is an ordered layout of :class:`FieldSlot` and
:class:`Marker` items. The layout order is the canonical emission order; a
slot belongs to the subclass opened by the nearest marker before it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Sequence, Union

from .errors import DXFPreconditionError
from .tags import ValueKind, kind_for_code
from .versions import OLDEST, SUBCLASS_MARKERS_MIN, DXFVersion, in_range

_AXES = ("x", "y", "z")


@dataclass(frozen=True)
class Marker:
    name: str
    min_version: DXFVersion = SUBCLASS_MARKERS_MIN
    max_version: DXFVersion | None = None
    aliases: tuple[str, ...] = ()
    optional: bool = False

    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    def accepts(self, version: DXFVersion) -> bool:
        return in_range(version, self.min_version, self.max_version)


@dataclass(frozen=True)
class FieldSlot:
    code: int
    name: str
    kind: ValueKind
    repeated: bool = False
    min_version: DXFVersion = OLDEST
    max_version: DXFVersion | None = None
    default: Any = None
    required: bool = False
    identifier: bool = False
    group: str | None = None
    subclass: str | None = None
    app_group: str | None = None
    count_of: str | None = None

    @property
    def multiplicity(self) -> str:
        return "repeated" if self.repeated else "single"

    def accepts(self, version: DXFVersion) -> bool:
        return in_range(version, self.min_version, self.max_version)

    def initial_value(self) -> Any:
        if self.repeated:
            return []
        return self.default

    def is_default(self, value: Any) -> bool:
        if self.repeated:
            return not value
        return value == self.default


@dataclass(frozen=True)
class PointSpec:
    code: int
    name: str
    default: tuple[float, ...]
    repeated: bool = False
    min_version: DXFVersion = OLDEST
    max_version: DXFVersion | None = None
    required: bool = False
    group: str | None = None

    def slots(self) -> list[FieldSlot]:
        out = []
        for index, component in enumerate(self.default):
            out.append(
                FieldSlot(
                    code=self.code + 10 * index,
                    name=f"{self.name}_{_AXES[index]}",
                    kind=ValueKind.DOUBLE,
                    repeated=self.repeated,
                    min_version=self.min_version,
                    max_version=self.max_version,
                    default=float(component),
                    required=self.required,
                    group=self.group,
                )
            )
        return out


LayoutItem = Union[FieldSlot, Marker, PointSpec]


def field(
    code: int,
    name: str,
    default: Any = None,
    *,
    kind: ValueKind | None = None,
    repeated: bool = False,
    min_version: DXFVersion = OLDEST,
    max_version: DXFVersion | None = None,
    required: bool = False,
    identifier: bool = False,
    group: str | None = None,
    app_group: str | None = None,
    count_of: str | None = None,
) -> FieldSlot:
    """One group code mapped to one field.

    ``identifier`` fields name something (a layer, a block, a tag) and a
    record with an empty one is not written. ``count_of`` makes the encoder
    derive the value from the length of another repeated field.
    """
    return FieldSlot(
        code=code,
        name=name,
        kind=kind if kind is not None else kind_for_code(code),
        repeated=repeated,
        min_version=min_version,
        max_version=max_version,
        default=default,
        required=required or identifier,
        identifier=identifier,
        group=group,
        app_group=app_group,
        count_of=count_of,
    )


def point(
    code: int,
    name: str,
    default: Sequence[float] = (0.0, 0.0, 0.0),
    *,
    repeated: bool = False,
    min_version: DXFVersion = OLDEST,
    max_version: DXFVersion | None = None,
    required: bool = False,
    group: str | None = None,
) -> PointSpec:
    """A 2D or 3D point stored as one slot per axis on codes N, N+10, N+20.

    A repeated point without a group forms its own row group, so every
    vertex is written as an x/y/z run.
    """
    if not 2 <= len(default) <= 3:
        raise ValueError(f"point {name!r} needs 2 or 3 components")
    if repeated and group is None:
        group = name
    return PointSpec(
        code=code,
        name=name,
        default=tuple(float(v) for v in default),
        repeated=repeated,
        min_version=min_version,
        max_version=max_version,
        required=required,
        group=group,
    )


def marker(
    name: str,
    min_version: DXFVersion = SUBCLASS_MARKERS_MIN,
    max_version: DXFVersion | None = None,
    *,
    aliases: Sequence[str] = (),
    optional: bool = False,
) -> Marker:
    return Marker(name, min_version, max_version, tuple(aliases), optional)


class EntitySchema:
    def __init__(self, dxftype: str, header: Iterable[LayoutItem], body: Iterable[LayoutItem]) -> None:
        if not dxftype:
            raise DXFPreconditionError("schema requires an entity type keyword")
        self.dxftype = dxftype
        layout: list[FieldSlot | Marker] = []
        points: dict[str, tuple[str, ...]] = {}
        subclass: str | None = None
        for item in [*header, *body]:
            if isinstance(item, Marker):
                subclass = item.name
                layout.append(item)
                continue
            if isinstance(item, PointSpec):
                expanded = item.slots()
                points[item.name] = tuple(slot.name for slot in expanded)
            else:
                expanded = [item]
            for slot in expanded:
                layout.append(replace(slot, subclass=subclass))

        self.layout: tuple[FieldSlot | Marker, ...] = tuple(layout)
        self.slots: tuple[FieldSlot, ...] = tuple(
            item for item in self.layout if isinstance(item, FieldSlot)
        )
        self.markers: tuple[Marker, ...] = tuple(
            item for item in self.layout if isinstance(item, Marker)
        )
        self.points = points

        by_name: dict[str, FieldSlot] = {}
        by_code: dict[int, list[FieldSlot]] = {}
        groups: dict[str, list[FieldSlot]] = {}
        for slot in self.slots:
            if slot.name in by_name:
                raise ValueError(f"{dxftype}: duplicate field name {slot.name!r}")
            by_name[slot.name] = slot
            by_code.setdefault(slot.code, []).append(slot)
            if slot.group is not None:
                if not slot.repeated:
                    raise ValueError(f"{dxftype}: grouped field {slot.name!r} must be repeated")
                groups.setdefault(slot.group, []).append(slot)
        for slot in self.slots:
            if slot.count_of is not None:
                counted = by_name.get(slot.count_of)
                if counted is None or not counted.repeated:
                    raise ValueError(f"{dxftype}: {slot.name!r} counts unknown field {slot.count_of!r}")
        self._by_name = by_name
        self._by_code = {code: tuple(slots) for code, slots in by_code.items()}
        self.groups = {name: tuple(slots) for name, slots in groups.items()}
        self._point_of = {
            component: name for name, components in points.items() for component in components
        }

    def __repr__(self) -> str:
        return f"EntitySchema({self.dxftype!r}, {len(self.slots)} fields)"

    def slot(self, name: str) -> FieldSlot:
        return self._by_name[name]

    def has_field(self, name: str) -> bool:
        return name in self._by_name

    def slots_for(self, code: int, version: DXFVersion | None = None) -> tuple[FieldSlot, ...]:
        slots = self._by_code.get(code, ())
        if version is None:
            return slots
        return tuple(slot for slot in slots if slot.accepts(version))

    def knows_code(self, code: int) -> bool:
        return code in self._by_code

    def markers_for(self, version: DXFVersion) -> tuple[str, ...]:
        names: list[str] = []
        for item in self.markers:
            if item.accepts(version):
                names.extend(item.names())
        return tuple(dict.fromkeys(names))

    def marker_named(self, name: str, version: DXFVersion) -> Marker | None:
        """The layout marker that ``name`` spells, directly or as an alias."""
        for item in self.markers:
            if item.accepts(version) and name in item.names():
                return item
        return None

    def group_leader(self, slot: FieldSlot) -> FieldSlot | None:
        if slot.group is None:
            return None
        return self.groups[slot.group][0]

    def point_of(self, slot: FieldSlot) -> str | None:
        return self._point_of.get(slot.name)

    def point_slots(self, name: str) -> tuple[FieldSlot, ...]:
        return tuple(self._by_name[component] for component in self.points[name])

    def new_fields(self) -> dict[str, Any]:
        return {slot.name: slot.initial_value() for slot in self.slots}
