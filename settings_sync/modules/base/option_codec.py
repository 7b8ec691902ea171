"""Bidirectional tables between persisted option symbols and selector indices."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound=IntEnum)


class ToolbarPosition(IntEnum):
    TOP_LEFT = 0
    TOP_CENTER = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 3
    BOTTOM_CENTER = 4
    BOTTOM_RIGHT = 5


class ToolbarMonitor(IntEnum):
    MAIN_MONITOR = 0
    ALL_MONITORS = 1


class OptionCodec(Generic[E]):
    """Maps a closed IntEnum to the strings stored in settings files.

    ``decode`` returns None for unknown symbols so the caller can keep its
    previous index. ``encode`` of an index outside the enum raises
    ValueError: selectors only ever produce valid indices.
    """

    def __init__(self, enum_type: Type[E], symbols: Mapping[E, str]) -> None:
        missing = [member.name for member in enum_type if member not in symbols]
        if missing:
            raise ValueError(f"{enum_type.__name__} has no symbol for: {', '.join(missing)}")
        self._enum_type = enum_type
        self._to_symbol: Dict[E, str] = {enum_type(member): symbol for member, symbol in symbols.items()}
        self._to_member: Dict[str, E] = {symbol: member for member, symbol in self._to_symbol.items()}

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._to_symbol[member] for member in self._enum_type)

    def __len__(self) -> int:
        return len(self._to_symbol)

    def encode(self, index: int) -> str:
        try:
            member = self._enum_type(index)
        except ValueError:
            raise ValueError(f"{index!r} is not a valid {self._enum_type.__name__} index") from None
        return self._to_symbol[member]

    def decode(self, symbol: Optional[str]) -> Optional[E]:
        if symbol is None:
            return None
        return self._to_member.get(symbol)


TOOLBAR_POSITIONS: OptionCodec[ToolbarPosition] = OptionCodec(
    ToolbarPosition,
    {
        ToolbarPosition.TOP_LEFT: "Top left corner",
        ToolbarPosition.TOP_CENTER: "Top center",
        ToolbarPosition.TOP_RIGHT: "Top right corner",
        ToolbarPosition.BOTTOM_LEFT: "Bottom left corner",
        ToolbarPosition.BOTTOM_CENTER: "Bottom center",
        ToolbarPosition.BOTTOM_RIGHT: "Bottom right corner",
    },
)

TOOLBAR_MONITORS: OptionCodec[ToolbarMonitor] = OptionCodec(
    ToolbarMonitor,
    {
        ToolbarMonitor.MAIN_MONITOR: "Main monitor",
        ToolbarMonitor.ALL_MONITORS: "All monitors",
    },
)


__all__ = [
    "OptionCodec",
    "TOOLBAR_MONITORS",
    "TOOLBAR_POSITIONS",
    "ToolbarMonitor",
    "ToolbarPosition",
]
