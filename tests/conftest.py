"""Shared pytest fixtures for evdash tests."""

from pathlib import Path

import pytest

from evdash.models.types import FilterCriteria, YearRange

CSV_HEADER = "VIN,County,City,Model Year,Make,Model,Electric Vehicle Type,Electric Range,Base MSRP"


def make_record(**fields) -> dict:
    """Build a record keyed by dataset column titles.

    Keyword arguments use underscores for spaces, e.g. Model_Year="2020".
    """
    return {key.replace("_", " "): value for key, value in fields.items()}


@pytest.fixture
def tesla_records() -> list[dict]:
    """Two Teslas from 2020, the second without an MSRP."""
    return [
        make_record(Make="Tesla", Model_Year="2020", Electric_Range="250", Base_MSRP="40000"),
        make_record(Make="Tesla", Model_Year="2020", Electric_Range="300", Base_MSRP=""),
    ]


@pytest.fixture
def fleet_records() -> list[dict]:
    """A small mixed dataset across counties, cities, years and makes."""
    return [
        make_record(
            County="King", City="Seattle", Model_Year="2020", Make="TESLA", Model="MODEL 3",
            Electric_Vehicle_Type="Battery Electric Vehicle (BEV)",
            Electric_Range="322", Base_MSRP="0",
        ),
        make_record(
            County="King", City="Bellevue", Model_Year="2018", Make="NISSAN", Model="LEAF",
            Electric_Vehicle_Type="Battery Electric Vehicle (BEV)",
            Electric_Range="151", Base_MSRP="",
        ),
        make_record(
            County="Snohomish", City="Everett", Model_Year="2019", Make="CHEVROLET", Model="VOLT",
            Electric_Vehicle_Type="Plug-in Hybrid Electric Vehicle (PHEV)",
            Electric_Range="53", Base_MSRP="33950",
        ),
        make_record(
            County="King", City="Seattle", Model_Year="2021", Make="TESLA", Model="MODEL Y",
            Electric_Vehicle_Type="Battery Electric Vehicle (BEV)",
            Electric_Range="", Base_MSRP="",
        ),
        make_record(
            County="Kitsap", City="Bremerton", Model_Year="2018", Make="TESLA", Model="MODEL S",
            Electric_Vehicle_Type="Battery Electric Vehicle (BEV)",
            Electric_Range="249", Base_MSRP="69900",
        ),
        make_record(
            County="King", City="Seattle", Model_Year="", Make="FORD", Model="FUSION",
            Electric_Vehicle_Type="Plug-in Hybrid Electric Vehicle (PHEV)",
            Electric_Range="26", Base_MSRP="",
        ),
    ]


@pytest.fixture
def open_criteria() -> FilterCriteria:
    """No categorical constraints, years 2000-2025."""
    return FilterCriteria(year=YearRange(min=2000, max=2025))


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write CSV text to a temp file and return its path."""

    def _write(text: str, name: str = "vehicles.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
