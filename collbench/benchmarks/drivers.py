from __future__ import annotations

import enum
import logging
from typing import Callable, Iterable, Optional

from ..containers import Backing, MapCollection, SequenceCollection, SetCollection
from ..records import IdentifiedPerson, Person, seed_identified_people, seed_people
from ..timer import END_MARKER, Timer, TimingResult
from .config import BenchmarkConfig, ListCommand, MapCommand, Menu, MenuPlan, SetCommand

LOGGER = logging.getLogger("collbench.benchmark")

Handler = Callable[[Backing], Optional[TimingResult]]

MAP_LOOKUP_KEYS = ("1", "2", "3", "4", "5", "6")
MAP_REMOVAL_KEYS = ("1", "2", "3", "4", "5", "6", "7")
# Never present in a seeded set, so every removal is a miss.
SET_REMOVAL_RECORDS = tuple(seed_identified_people(2))


class BenchmarkDriver:
    """Runs one menu command against every backing listed in the plan."""

    def __init__(
        self,
        plan: MenuPlan,
        config: BenchmarkConfig,
        timer: Optional[Timer] = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.plan = plan
        self.config = config
        self.output = output
        self.timer = timer or Timer(output)

    def handlers(self) -> dict[enum.IntEnum, Handler]:
        raise NotImplementedError

    def run(self, command: enum.IntEnum) -> list[TimingResult]:
        handler = self.handlers()[command]
        results: list[TimingResult] = []
        for backing in self.plan.backings_for(command):
            LOGGER.info("Running %s/%s on %s", self.plan.menu.value, command.name, backing.name)
            result = handler(backing)
            if result is not None:
                results.append(result)
        return results

    def _show_order(self, backing: Backing, lines: Iterable[str]) -> None:
        self.output(f"Start ({backing.name}):")
        for index, line in enumerate(lines):
            self.output(line)
            if index == self.config.sample_count:
                break
        self.output(END_MARKER)


class SequenceDriver(BenchmarkDriver):
    def handlers(self) -> dict[enum.IntEnum, Handler]:
        return {
            ListCommand.FILL: self.fill,
            ListCommand.GET: self.get_item,
            ListCommand.REMOVE_MIDDLE: self.remove_middle_item,
            ListCommand.REMOVE_END: self.remove_end_item,
            ListCommand.ADD_MIDDLE: self.add_middle_item,
        }

    def seed(self, backing: Backing) -> SequenceCollection[Person]:
        collection: SequenceCollection[Person] = SequenceCollection(backing)
        for person in seed_people(self.config.record_volume):
            collection.append(person)
        return collection

    def fill(self, backing: Backing) -> TimingResult:
        token = self.timer.start(backing.name)
        self.seed(backing)
        return self.timer.stop(token)

    def get_item(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        person = collection.get(self.config.middle_index)
        self.output(f"Person: {person.name}")
        return self.timer.stop(token)

    def remove_middle_item(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        collection.remove_at(self.config.middle_index)
        return self.timer.stop(token)

    def remove_end_item(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        collection.remove_at(len(collection) - 1)
        return self.timer.stop(token)

    def add_middle_item(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        collection.insert_at(Person(25, "Name 4"), self.config.middle_index)
        return self.timer.stop(token)


class MapDriver(BenchmarkDriver):
    def handlers(self) -> dict[enum.IntEnum, Handler]:
        return {
            MapCommand.FILL: self.fill,
            MapCommand.SHOW_ORDER: self.show_order,
            MapCommand.GET: self.get_items,
            MapCommand.REMOVE: self.remove_items,
        }

    def seed(self, backing: Backing) -> MapCollection[str, Person]:
        collection: MapCollection[str, Person] = MapCollection(backing)
        for i in range(1, self.config.seeded_records):
            collection.put(str(i), Person(20, f"Name - {i}"))
        return collection

    def fill(self, backing: Backing) -> TimingResult:
        token = self.timer.start(backing.name)
        self.seed(backing)
        return self.timer.stop(token)

    def show_order(self, backing: Backing) -> None:
        collection = self.seed(backing)
        self._show_order(backing, (f"key: {key}" for key in collection))

    def get_items(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        for _ in range(self.config.record_volume):
            for key in MAP_LOOKUP_KEYS:
                collection.get(key)
        return self.timer.stop(token)

    def remove_items(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        for _ in range(self.config.record_volume):
            for key in MAP_REMOVAL_KEYS:
                collection.remove_key(key)
        return self.timer.stop(token)


class SetDriver(BenchmarkDriver):
    def handlers(self) -> dict[enum.IntEnum, Handler]:
        return {
            SetCommand.FILL: self.fill,
            SetCommand.SHOW_ORDER: self.show_order,
            SetCommand.REMOVE: self.remove_items,
        }

    def seed(self, backing: Backing) -> SetCollection[IdentifiedPerson]:
        collection: SetCollection[IdentifiedPerson] = SetCollection(backing)
        for i in range(1, self.config.seeded_records):
            name = f"Name - {i}"
            collection.add(IdentifiedPerson(1, 20, name))
            collection.add(IdentifiedPerson(2, 20, name))
            collection.add(IdentifiedPerson(3, 20, name))
        return collection

    def fill(self, backing: Backing) -> TimingResult:
        token = self.timer.start(backing.name)
        self.seed(backing)
        return self.timer.stop(token)

    def show_order(self, backing: Backing) -> None:
        collection = self.seed(backing)
        self._show_order(backing, (f"name: {person.name}" for person in collection))

    def remove_items(self, backing: Backing) -> TimingResult:
        collection = self.seed(backing)
        token = self.timer.start(backing.name)
        for _ in range(self.config.record_volume):
            for person in SET_REMOVAL_RECORDS:
                collection.remove(person)
        return self.timer.stop(token)


DRIVERS: dict[Menu, type[BenchmarkDriver]] = {
    Menu.LIST: SequenceDriver,
    Menu.MAP: MapDriver,
    Menu.SET: SetDriver,
}


def create_driver(
    plan: MenuPlan,
    config: BenchmarkConfig,
    timer: Optional[Timer] = None,
    output: Callable[[str], None] = print,
) -> BenchmarkDriver:
    return DRIVERS[plan.menu](plan, config, timer=timer, output=output)
