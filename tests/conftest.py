"""Conformance fixture loader for reqconv.

Loads YAML fixtures from tests/fixtures/ and converts them to reqconv
types for parametrized testing.
"""

from __future__ import annotations

from collections.abc import Buffer, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from reqconv.http import AggregatedHttpRequest, ByteArrayRequestConverter, HttpData
from reqconv.testing import aggregated_request

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

# Names usable as expected_type in fixture files.
EXPECTED_TYPES: dict[str, Any] = {
    "bytearray": bytearray,
    "bytes": bytes,
    "HttpData": HttpData,
    "object": object,
    "Any": Any,
    "Buffer": Buffer,
    "Sequence": Sequence,
    "bytes | None": bytes | None,
    "str": str,
    "int": int,
    "dict": dict,
    "memoryview": memoryview,
}


@dataclass
class ConverterCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    request: AggregatedHttpRequest
    expected_type: Any
    can_handle: bool
    result: bytes | None
    result_type: str | None

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_converter_fixtures() -> list[ConverterCase]:
    """Load all converter conformance fixtures."""
    cases: list[ConverterCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[ConverterCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[ConverterCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            request = aggregated_request(
                bytes.fromhex(doc.get("body_hex", "")),
                doc.get("content_type"),
            )
            for case in doc["cases"]:
                result_hex = case.get("result_hex")
                cases.append(
                    ConverterCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        request=request,
                        expected_type=EXPECTED_TYPES[case["expected_type"]],
                        can_handle=case["can_handle"],
                        result=bytes.fromhex(result_hex) if result_hex is not None else None,
                        result_type=case.get("result_type"),
                    )
                )
    return cases


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def converter() -> ByteArrayRequestConverter:
    return ByteArrayRequestConverter()


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``converter_case`` / ``accepted_case`` from the YAML fixtures."""
    if "converter_case" in metafunc.fixturenames:
        cases = load_converter_fixtures()
        metafunc.parametrize("converter_case", cases, ids=[c.id for c in cases])
    if "accepted_case" in metafunc.fixturenames:
        cases = [c for c in load_converter_fixtures() if c.can_handle]
        metafunc.parametrize("accepted_case", cases, ids=[c.id for c in cases])
