"""Stylesheet model: rules, selectors, declarations and typed values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Unit(Enum):
    """Length units understood by the stylesheet parser."""

    PX = "px"
    EM = "em"
    REM = "rem"
    VH = "vh"
    VW = "vw"
    VMIN = "vmin"
    VMAX = "vmax"

    @classmethod
    def parse(cls, text: str) -> Unit:
        """Map a unit suffix to a Unit, defaulting to px."""
        try:
            return cls(text)
        except ValueError:
            return cls.PX


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __str__(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


@dataclass(frozen=True)
class Length:
    number: float
    unit: Unit = Unit.PX

    def __str__(self) -> str:
        return f"{self.number:g}{self.unit.value}"


@dataclass(frozen=True)
class Other:
    """Free-form value for properties without a typed domain."""

    text: str

    def __str__(self) -> str:
        return self.text


Value = Union[Color, Length, Other]


@dataclass(frozen=True)
class SimpleSelector:
    """A tag/id/class constraint group. All fields empty means "no constraint"."""

    tag_name: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        result = self.tag_name or ""
        if self.id is not None:
            result += f"#{self.id}"
        for cls in self.classes:
            result += f".{cls}"
        return result


@dataclass(frozen=True)
class Selector:
    """A selector holding at most one simple selector.

    ``combinators`` is reserved for descendant/child combinators and is
    always empty.
    """

    simple: list[SimpleSelector] = field(default_factory=list)
    combinators: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return ", ".join(str(s) for s in self.simple)


@dataclass(frozen=True)
class Declaration:
    property: str
    value: Value

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class Rule:
    """Selectors paired with the declarations they apply."""

    selectors: list[Selector] = field(default_factory=list)
    declarations: list[Declaration] = field(default_factory=list)

    def __str__(self) -> str:
        body = "".join(f"    {d};\n" for d in self.declarations)
        return ", ".join(str(s) for s in self.selectors) + " {\n" + body + "}"


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order. Later rules override earlier ones."""

    rules: list[Rule] = field(default_factory=list)

    def __str__(self) -> str:
        return "\n\n".join(str(r) for r in self.rules)
