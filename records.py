# -*- coding: utf-8 -*-
########################
# records.py
########################
# Purpose:
# - Keeps the list of players who have recorded themselves.
# - Rejects a record when a structurally equal one is already stored.
#
# Design notes:
# - Add-only. There is no removal.
# - Containment is a linear scan using FroggerID equality. The list stays in insertion order.
#
########################
# Interfaces:
# Public classes:
# - class Records
#   - __init__() -> None
#   - from_iterable(frogger_ids: Iterable[FroggerID]) -> Records
#   - add_record(frogger_id: FroggerID) -> bool
#   - contains(frogger_id: FroggerID) -> bool
#   - records() -> list[FroggerID]
#
# Inputs:
# - FroggerID values constructed by callers (config seed, CLI, game code).
#
# Outputs:
# - True/False per add, copies of the stored list for display.
#
########################

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from frogger_models import FroggerID

logger = logging.getLogger(__name__)


class Records:
    def __init__(self) -> None:
        self._records: List[FroggerID] = []

    @classmethod
    def from_iterable(cls, frogger_ids: Iterable[FroggerID]) -> Records:
        records = cls()
        for frogger_id in frogger_ids:
            records.add_record(frogger_id)
        return records

    def add_record(self, frogger_id: FroggerID) -> bool:
        """Add a player's record.

        Returns False when an equal record already exists, True when it was appended.
        """
        if frogger_id in self._records:
            logger.debug("Duplicate record ignored: %s %s", frogger_id.first_name, frogger_id.last_name)
            return False
        self._records.append(frogger_id)
        logger.debug("Record added (%d total)", len(self._records))
        return True

    def contains(self, frogger_id: FroggerID) -> bool:
        return frogger_id in self._records

    def records(self) -> List[FroggerID]:
        return list(self._records)

    def __contains__(self, frogger_id: object) -> bool:
        return self.contains(frogger_id)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FroggerID]:
        return iter(list(self._records))


def _run_unit_tests() -> None:
    first = FroggerID("Ada", "Lovelace", "412-555-0100", "15213", "PA", "F")
    second = FroggerID("Alan", "Turing", "412-555-0199", "15217", "PA", "M")
    records = Records()

    assert records.add_record(first) is True
    assert records.records() == [first]

    assert records.add_record(FroggerID(**first.to_dict())) is False
    assert records.records() == [first]

    assert records.add_record(second) is True
    assert records.records() == [first, second]

    snapshot = records.records()
    snapshot.clear()
    assert len(records) == 2

    seeded = Records.from_iterable([second, first, second])
    assert seeded.records() == [second, first]


if __name__ == "__main__":
    _run_unit_tests()
    print("records.py: ok")
