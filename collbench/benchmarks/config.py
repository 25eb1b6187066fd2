from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..containers import MAP_BACKINGS, SEQUENCE_BACKINGS, SET_BACKINGS, Backing

DEFAULT_RECORD_VOLUME = 1_000_000
DEFAULT_SAMPLE_COUNT = 20


class Menu(str, enum.Enum):
    LIST = "list"
    MAP = "map"
    SET = "set"


class ListCommand(enum.IntEnum):
    FILL = 1
    GET = 2
    REMOVE_MIDDLE = 3
    REMOVE_END = 4
    ADD_MIDDLE = 5


class MapCommand(enum.IntEnum):
    FILL = 1
    SHOW_ORDER = 2
    GET = 3
    REMOVE = 4


class SetCommand(enum.IntEnum):
    FILL = 1
    SHOW_ORDER = 2
    REMOVE = 3


@dataclass(frozen=True)
class BenchmarkConfig:
    """Workload knobs handed to every driver invocation."""

    record_volume: int = DEFAULT_RECORD_VOLUME
    sample_count: int = DEFAULT_SAMPLE_COUNT

    def __post_init__(self) -> None:
        if self.record_volume <= 0:
            raise ValueError("record_volume must be > 0")
        if self.sample_count < 0:
            raise ValueError("sample_count must be >= 0")

    @property
    def seeded_records(self) -> int:
        return 3 * self.record_volume

    @property
    def middle_index(self) -> int:
        return self.record_volume // 2


@dataclass(frozen=True)
class MenuPlan:
    """Static selector table for one menu: which command runs on which backings."""

    menu: Menu
    prompt: str
    commands: type[enum.IntEnum]
    backings: Sequence[Backing]

    def lookup(self, selector: Optional[int]) -> Optional[enum.IntEnum]:
        if selector is None:
            return None
        try:
            return self.commands(selector)
        except ValueError:
            return None

    def backings_for(self, command: enum.IntEnum) -> list[Backing]:
        return list(self.backings)

    def __iter__(self) -> Iterator[enum.IntEnum]:
        return iter(self.commands)


def default_plans() -> dict[Menu, MenuPlan]:
    """Return the selector tables for the list, map and set menus."""

    return {
        Menu.LIST: MenuPlan(
            menu=Menu.LIST,
            prompt=(
                "Enter collection test (fill - 1, get - 2, remove middle - 3, "
                "remove end - 4, add middle - 5): "
            ),
            commands=ListCommand,
            backings=list(SEQUENCE_BACKINGS.values()),
        ),
        Menu.MAP: MenuPlan(
            menu=Menu.MAP,
            prompt=(
                "Enter collection test (fill - 1, show collection order - 2, "
                "get - 3, remove - 4): "
            ),
            commands=MapCommand,
            backings=list(MAP_BACKINGS.values()),
        ),
        Menu.SET: MenuPlan(
            menu=Menu.SET,
            prompt="Enter collection test (fill - 1, show collection order - 2, remove - 3): ",
            commands=SetCommand,
            backings=list(SET_BACKINGS.values()),
        ),
    }
