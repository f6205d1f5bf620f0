"""Pytest configuration and shared fixtures for case layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from editbook.application.config import ValidatorRegistry
from editbook.domain.entities import CaseConfiguration
from editbook.domain.services import create_case
from editbook.domain.value_objects import EquipmentType


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def single_wing_case() -> CaseConfiguration:
    """One 124-D wing, leftmost and rightmost, with its reserved cells."""
    return create_case([EquipmentType.ITEM_124D])


@pytest.fixture
def two_wing_case() -> CaseConfiguration:
    """A 124-D wing in slot 0 and a 143-D wing in slot 1."""
    return create_case([EquipmentType.ITEM_124D, EquipmentType.ITEM_143D])


@pytest.fixture
def case_data() -> dict[str, Any]:
    """A minimal valid case file as a dictionary."""
    return {
        "schema_version": "1.0",
        "route": {"route_id": "R001", "zip": "12345", "route_number": "001"},
        "wings": [
            {"position": 0, "equipment_type": "124-D"},
            {"position": 1, "equipment_type": "143-D"},
        ],
        "addresses": [
            {"id": "a1", "cell_size": 2, "address_number": "100", "street_name": "Main St"},
            {"id": "a2", "cell_size": 1, "address_number": "102", "street_name": "Main St"},
            {"id": "a3", "cell_size": 0, "address_number": "104", "street_name": "Main St"},
        ],
    }


@pytest.fixture
def write_case_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing a case dictionary to a JSON file."""

    def _write(data: dict[str, Any], name: str = "case.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_registry():
    """Run a test against an empty validator registry, restored afterwards."""
    saved = dict(ValidatorRegistry._validators)
    ValidatorRegistry.clear()
    yield ValidatorRegistry
    ValidatorRegistry.clear()
    for validator in saved.values():
        ValidatorRegistry.register(validator)
