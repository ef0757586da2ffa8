# -*- coding: utf-8 -*-
########################
# road.py
########################
# Purpose:
# - Occupancy model for one lane of the road.
# - Answers whether a discrete position along the lane is occupied.
#
# Design notes:
# - Length is fixed at construction. Flags are copied into a tuple, so occupied()
#   hands out an immutable view and callers cannot mutate the lane behind its back.
# - Out-of-range positions read as not occupied. Use occupancy_at() to tell
#   "free" from "out of range".
#
########################
# Interfaces:
# Public classes:
# - class Road
#   - __init__(occupied: Sequence[bool]) -> None
#   - from_pattern(pattern: str) -> Road
#   - occupied() -> tuple[bool, ...]
#   - length() -> int
#   - is_valid(position: int) -> bool
#   - is_occupied(position: int) -> bool
#   - occupancy_at(position: int) -> Occupancy
#   - to_pattern() -> str
#
# Inputs:
# - Per-position flags, or a lane pattern string such as ".X..X".
#
# Outputs:
# - Booleans and Occupancy values for game logic.
#
########################

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from frogger_models import Occupancy

logger = logging.getLogger(__name__)

OCCUPIED_PATTERN_CHARS = frozenset("Xx#1")
FREE_PATTERN_CHARS = frozenset(".-_0")


class Road:
    def __init__(self, occupied: Sequence[bool]) -> None:
        if occupied is None:
            raise TypeError("Road requires a sequence of occupancy flags")
        self._occupied: Tuple[bool, ...] = tuple(bool(flag) for flag in occupied)
        logger.debug("Road built with %d positions", len(self._occupied))

    @classmethod
    def from_pattern(cls, pattern: str) -> Road:
        flags = []
        for index, character in enumerate(str(pattern)):
            if character in OCCUPIED_PATTERN_CHARS:
                flags.append(True)
            elif character in FREE_PATTERN_CHARS:
                flags.append(False)
            else:
                raise ValueError(f"Invalid lane pattern character {character!r} at index {index}")
        return cls(flags)

    def occupied(self) -> Tuple[bool, ...]:
        return self._occupied

    def length(self) -> int:
        return len(self._occupied)

    def is_valid(self, position: int) -> bool:
        return 0 <= position < len(self._occupied)

    def is_occupied(self, position: int) -> bool:
        if not self.is_valid(position):
            return False
        return self._occupied[position]

    def occupancy_at(self, position: int) -> Occupancy:
        if not self.is_valid(position):
            return Occupancy.OUT_OF_RANGE
        if self._occupied[position]:
            return Occupancy.OCCUPIED
        return Occupancy.FREE

    def to_pattern(self) -> str:
        return "".join("X" if flag else "." for flag in self._occupied)

    def __len__(self) -> int:
        return len(self._occupied)

    def __repr__(self) -> str:
        return f"Road({self.to_pattern()!r})"


def _run_unit_tests() -> None:
    flags = [False, True, False]
    road = Road(flags)

    assert road.is_occupied(0) is False
    assert road.is_occupied(1) is True
    assert road.is_occupied(-1) is False
    assert road.is_occupied(3) is False
    assert road.is_valid(2) is True
    assert road.is_valid(3) is False

    flags[0] = True
    assert road.is_occupied(0) is False
    assert road.occupied() == (False, True, False)

    assert road.occupancy_at(1) is Occupancy.OCCUPIED
    assert road.occupancy_at(0) is Occupancy.FREE
    assert road.occupancy_at(7) is Occupancy.OUT_OF_RANGE

    assert Road.from_pattern(".X.").occupied() == road.occupied()
    assert Road.from_pattern("x#1-_0").to_pattern() == "XXX..."

    try:
        Road.from_pattern(".?")
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError for unknown pattern character")


if __name__ == "__main__":
    _run_unit_tests()
    print("road.py: ok")
