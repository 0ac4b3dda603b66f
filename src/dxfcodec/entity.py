from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .tags import Tag

Point3D = tuple[float, float, float]

_AXES = ("x", "y", "z")


@dataclass
class Entity:
    dxftype: str
    dxf: dict[str, Any] = field(default_factory=dict)
    xdata: list[Tag] = field(default_factory=list)
    # Primary marker name -> the spelling read for it (aliases and optional markers only).
    subclasses: dict[str, str] = field(default_factory=dict)
    next: "Entity | None" = field(default=None, repr=False, compare=False)
    chain: Any = field(default=None, repr=False, compare=False)

    @property
    def handle(self) -> int | None:
        return self.dxf.get("handle")

    @property
    def layer(self) -> str:
        return self.dxf.get("layer", "0")

    @property
    def linetype(self) -> str:
        return self.dxf.get("linetype", "BYLAYER")

    @property
    def color(self) -> int:
        return self.dxf.get("color", 256)

    @property
    def paperspace(self) -> bool:
        return bool(self.dxf.get("paperspace", 0))

    def get(self, name: str, default: Any = None) -> Any:
        return self.dxf.get(name, default)

    def set(self, name: str, value: Any) -> "Entity":
        if name not in self.dxf:
            raise KeyError(f"{self.dxftype} has no field {name!r}")
        if isinstance(self.dxf[name], list):
            value = list(value)
        self.dxf[name] = value
        return self

    def point(self, name: str) -> tuple[float, ...]:
        return tuple(
            self.dxf[f"{name}_{axis}"] for axis in _AXES if f"{name}_{axis}" in self.dxf
        )

    def set_point(self, name: str, value: tuple[float, ...]) -> "Entity":
        names = [f"{name}_{axis}" for axis in _AXES if f"{name}_{axis}" in self.dxf]
        if not names:
            raise KeyError(f"{self.dxftype} has no point {name!r}")
        if len(value) != len(names):
            raise ValueError(f"point {name!r} takes {len(names)} components, got {len(value)}")
        for component, number in zip(names, value):
            self.dxf[component] = float(number)
        return self

    def points(self, name: str) -> list[tuple[float, ...]]:
        columns = [self.dxf[f"{name}_{axis}"] for axis in _AXES if f"{name}_{axis}" in self.dxf]
        return list(zip(*columns))
