# -*- coding: utf-8 -*-
########################
# frogger_models.py
########################
# Purpose:
# - Core value types shared by the records and road modules.
# - Defines the player identity record and the three-state lane occupancy answer.
#
# Design notes:
# - Keep these models stable. Prefer extending with new optional fields rather than breaking changes.
# - from_mapping strips surrounding whitespace so every input path yields the same record.
# - FroggerID is frozen: equality and hashing cover every field.
#
########################
# Interfaces:
# Public enums:
# - class Occupancy(enum.Enum): FREE | OCCUPIED | OUT_OF_RANGE
#
# Public dataclasses:
# - FroggerID(first_name: str, last_name: str, phone_number: str, zip_code: str, state: str, gender: str)
#   - from_mapping(mapping) -> FroggerID
#   - to_dict() -> dict[str, str]
#
# Inputs/Outputs:
# - FroggerID values are stored by records.Records.
# - Occupancy is returned by road.Road.occupancy_at.
#
########################

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import enum
from typing import Any, Dict, Mapping


class Occupancy(enum.Enum):
    FREE = "free"
    OCCUPIED = "occupied"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class FroggerID:
    first_name: str
    last_name: str
    phone_number: str
    zip_code: str
    state: str
    gender: str

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> FroggerID:
        values = {}
        for field_info in fields(cls):
            raw_value = mapping.get(field_info.name)
            values[field_info.name] = "" if raw_value is None else str(raw_value).strip()
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _run_unit_tests() -> None:
    first = FroggerID("Ada", "Lovelace", "412-555-0100", "15213", "PA", "F")
    same = FroggerID.from_mapping(first.to_dict())
    assert first == same
    assert first is not same
    assert hash(first) == hash(same)

    partial = FroggerID.from_mapping({"first_name": " Bo ", "zip_code": 15213})
    assert partial.first_name == "Bo"
    assert partial.last_name == ""
    assert partial.zip_code == "15213"
    assert partial != first


if __name__ == "__main__":
    _run_unit_tests()
    print("frogger_models.py: ok")
