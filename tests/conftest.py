from __future__ import annotations

from pathlib import Path

import pytest

SEPARATOR = "S20.G00.05.001,'01'\r\n"
HEADER = (
    "S10.G00.00.001,'Logiciel de paie'\r\n"
    "S10.G00.00.002,'Éditeur Général'\r\n"
    "S10.G00.00.006,'P01V01'\r\n"
)


def _record(pay_period: str | None, establishment_id: str | None, activity_code: str | None, name: str) -> str:
    lines = ["S20.G00.05.002,'01'", "S20.G00.05.003,'11'"]
    if pay_period is not None:
        lines.append(f"S20.G00.05.005,'{pay_period}'")
    if establishment_id is not None:
        lines.append(f"S21.G00.06.001,'{establishment_id}'")
    if activity_code is not None:
        lines.append(f"S21.G00.06.002,'{activity_code}'")
    lines.append(f"S21.G00.30.002,'{name}'")
    return "".join(f"{line}\r\n" for line in lines)


@pytest.fixture
def make_record():
    def _make(pay_period="01012023", establishment_id="111222333", activity_code="A", name="Hélène"):
        return _record(pay_period, establishment_id, activity_code, name)

    return _make


@pytest.fixture
def make_dsn():
    def _make(records: list[str], header: str = HEADER) -> str:
        return header + "".join(SEPARATOR + record for record in records)

    return _make


@pytest.fixture
def write_dsn(make_dsn):
    def _write(path: Path, records: list[str], header: str = HEADER) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(make_dsn(records, header).encode("latin-1"))
        return path

    return _write
