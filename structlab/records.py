"""Record types keyed for use in a HashTable, and table listings of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from structlab.hash_table import HashTable


@dataclass(frozen=True, eq=False)
class StudentRecord:
    """A student; two records with the same id are the same student."""

    name: str
    id: int
    grade: int

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True, eq=False)
class MonsterRecord:
    """A monster's statistics; two records with the same name are the same monster."""

    name: str
    ac: int
    hp: int
    speed: int
    cr: float

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MonsterRecord):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


def format_student_table(table: HashTable) -> str:
    """Render a table of students as fixed-width lines under a size header."""
    lines = [f"Table size: {len(table)}"]
    lines.extend(
        f"{student.name:<20}{student.id:<7}{student.grade:<3}" for student in table
    )
    return "\n".join(lines) + "\n"


def format_monster_table(table: HashTable) -> str:
    """Render a table of monsters as space-separated lines under a size header."""
    lines = [f"Size: {len(table)}"]
    lines.extend(
        f"{monster.name} {monster.ac} {monster.hp} {monster.speed} {monster.cr:g}"
        for monster in table
    )
    return "\n".join(lines) + "\n"