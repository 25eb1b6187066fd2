from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Person:
    """Record used by the list and map benchmarks; equal and ordered by name."""

    age: int
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: Person) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def with_age(self, age: int) -> Person:
        return dataclasses.replace(self, age=age)

    def with_name(self, name: str) -> Person:
        return dataclasses.replace(self, name=name)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class IdentifiedPerson:
    """Record used by the set benchmarks.

    Two records are equal when both ``person_id`` and ``name`` match. The hash
    only covers ``name``, so records sharing a name land in the same bucket and
    are told apart by id. Ordering is by name with the id as tie-breaker, which
    keeps sorted sets consistent with equality.
    """

    person_id: int
    age: int
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentifiedPerson):
            return NotImplemented
        return self.person_id == other.person_id and self.name == other.name

    def __lt__(self, other: IdentifiedPerson) -> bool:
        if not isinstance(other, IdentifiedPerson):
            return NotImplemented
        return (self.name, self.person_id) < (other.name, other.person_id)

    def __hash__(self) -> int:
        return hash(self.name)

    def with_age(self, age: int) -> IdentifiedPerson:
        return dataclasses.replace(self, age=age)

    def with_name(self, name: str) -> IdentifiedPerson:
        return dataclasses.replace(self, name=name)


def seed_people(volume: int) -> list[Person]:
    """Return ``3 * volume`` people cycling through three fixed names."""

    people: list[Person] = []
    for _ in range(volume):
        people.append(Person(30, "Name 1"))
        people.append(Person(22, "Name 2"))
        people.append(Person(40, "Name 3"))
    return people


def seed_identified_people(volume: int) -> list[IdentifiedPerson]:
    """Return ``3 * volume`` identified people sharing one name and three ids."""

    people: list[IdentifiedPerson] = []
    for _ in range(volume):
        people.append(IdentifiedPerson(1, 30, "Name 1"))
        people.append(IdentifiedPerson(2, 30, "Name 1"))
        people.append(IdentifiedPerson(3, 30, "Name 1"))
    return people


__all__ = [
    "IdentifiedPerson",
    "Person",
    "seed_identified_people",
    "seed_people",
]
