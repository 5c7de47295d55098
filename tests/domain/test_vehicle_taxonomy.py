"""
Test suite for the cascading vehicle taxonomy.

Every year-aware lookup takes the current year explicitly; tests pin it to
CURRENT_YEAR so results never depend on the wall clock.
"""

from __future__ import annotations

import pytest

from parts_market.domain.vehicle import ProductionRange, VehicleOptions, VehicleSelection
from parts_market.domain.vehicle_reference_data import (
    CARS_AND_TRUCKS,
    HEAVY_VEHICLES,
    MARINE_VEHICLES,
    MOTORCYCLES,
    PRODUCTION_RANGES,
    VEHICLE_TYPES,
)
from parts_market.domain.vehicle_taxonomy import (
    VehicleTaxonomy,
    covers_year,
    effective_end_year,
)

CURRENT_YEAR = 2025


@pytest.fixture()
def taxonomy() -> VehicleTaxonomy:
    return VehicleTaxonomy()


@pytest.fixture()
def small_taxonomy() -> VehicleTaxonomy:
    """Two makes, one of them without any production range."""
    return VehicleTaxonomy(
        vehicle_types=("Boats",),
        makes={"Boats": ("Acme", "Ghost")},
        models={("Boats", "Acme"): ("Old", "New", "Unranged"), ("Boats", "Ghost"): ("Phantom",)},
        production_ranges={
            ("Boats", "Acme", "Old"): ProductionRange(start_year=2000, end_year=2005),
            ("Boats", "Acme", "New"): ProductionRange(start_year=2020),
        },
        year_window=10,
    )


# ==============================================================================
# ProductionRange & effective_end_year
# ==============================================================================


def test_production_range_rejects_start_after_end() -> None:
    with pytest.raises(ValueError, match="start_year"):
        ProductionRange(start_year=2021, end_year=2020)


def test_production_range_allows_single_year() -> None:
    assert ProductionRange(start_year=2020, end_year=2020).end_year == 2020


def test_effective_end_year_open_range_is_current_year() -> None:
    assert effective_end_year(ProductionRange(start_year=1972), CURRENT_YEAR) == CURRENT_YEAR


def test_effective_end_year_closed_range_is_end_year() -> None:
    assert effective_end_year(ProductionRange(2007, 2020), CURRENT_YEAR) == 2020


def test_effective_end_year_caps_future_end_year() -> None:
    """A declared end year after the current year is capped."""
    assert effective_end_year(ProductionRange(2020, 2030), CURRENT_YEAR) == CURRENT_YEAR


def test_covers_year_is_inclusive_on_both_ends() -> None:
    fit = ProductionRange(2007, 2020)

    assert covers_year(fit, 2007, CURRENT_YEAR)
    assert covers_year(fit, 2020, CURRENT_YEAR)
    assert not covers_year(fit, 2006, CURRENT_YEAR)
    assert not covers_year(fit, 2021, CURRENT_YEAR)


# ==============================================================================
# Unfiltered lookups
# ==============================================================================


def test_vehicle_types_in_declared_order(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.vehicle_types() == [
        "Cars & Trucks",
        "Motorcycles",
        "Heavy Vehicles",
        "Marine Vehicles",
    ]


def test_makes_for_type_keeps_declared_order(taxonomy: VehicleTaxonomy) -> None:
    makes = taxonomy.makes_for_type(CARS_AND_TRUCKS)

    assert makes[:4] == ["Honda", "Toyota", "Nissan", "Ford"]
    assert len(makes) == 13


def test_unknown_lookups_return_empty_lists(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.makes_for_type("Spaceships") == []
    assert taxonomy.models_for_type_and_make(CARS_AND_TRUCKS, "Tesla") == []
    assert taxonomy.years_for_type("Spaceships", CURRENT_YEAR) == []
    assert taxonomy.makes_for_type_and_year("Spaceships", 2018, CURRENT_YEAR) == []
    assert (
        taxonomy.models_for_type_year_and_make(CARS_AND_TRUCKS, 2018, "Tesla", CURRENT_YEAR) == []
    )


def test_makes_without_models_are_listed_unfiltered(taxonomy: VehicleTaxonomy) -> None:
    """Audi has no models declared but still shows in the unfiltered list."""
    assert "Audi" in taxonomy.makes_for_type(CARS_AND_TRUCKS)
    assert taxonomy.models_for_type_and_make(CARS_AND_TRUCKS, "Audi") == []


# ==============================================================================
# Year-aware lookups
# ==============================================================================


def test_years_for_cars_cover_full_window(taxonomy: VehicleTaxonomy) -> None:
    """Civic (1972, open) keeps every year of the 30-year window populated."""
    years = taxonomy.years_for_type(CARS_AND_TRUCKS, CURRENT_YEAR)

    assert years[0] == 2025
    assert years[-1] == 1996
    assert len(years) == 30


@pytest.mark.parametrize("vehicle_type", VEHICLE_TYPES)
def test_years_strictly_descending_within_window(
    taxonomy: VehicleTaxonomy, vehicle_type: str
) -> None:
    years = taxonomy.years_for_type(vehicle_type, CURRENT_YEAR)

    assert years == sorted(set(years), reverse=True)
    assert all(CURRENT_YEAR - 29 <= year <= CURRENT_YEAR for year in years)


def test_heavy_vehicles_have_no_years(taxonomy: VehicleTaxonomy) -> None:
    """Heavy vehicle models have no production ranges registered."""
    assert taxonomy.years_for_type(HEAVY_VEHICLES, CURRENT_YEAR) == []


def test_years_follow_current_year(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.years_for_type(CARS_AND_TRUCKS, 2030)[0] == 2030


@pytest.mark.parametrize("vehicle_type", VEHICLE_TYPES)
def test_every_offered_year_has_makes(taxonomy: VehicleTaxonomy, vehicle_type: str) -> None:
    for year in taxonomy.years_for_type(vehicle_type, CURRENT_YEAR):
        assert taxonomy.makes_for_type_and_year(vehicle_type, year, CURRENT_YEAR), year


def test_makes_for_year_only_keep_makes_with_ranges(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.makes_for_type_and_year(CARS_AND_TRUCKS, 2018, CURRENT_YEAR) == [
        "Honda",
        "Toyota",
        "Ford",
    ]


def test_models_for_year_respect_end_years(taxonomy: VehicleTaxonomy) -> None:
    """Focus ended 2018, Fusion 2020."""
    models_2019 = taxonomy.models_for_type_year_and_make(
        CARS_AND_TRUCKS, 2019, "Ford", CURRENT_YEAR
    )

    assert "Focus" not in models_2019
    assert "Fusion" in models_2019
    assert "F-150" in models_2019


def test_models_for_year_respect_start_years(taxonomy: VehicleTaxonomy) -> None:
    models = taxonomy.models_for_type_year_and_make(MARINE_VEHICLES, 2010, "Yamaha", CURRENT_YEAR)

    assert models == ["F25", "F40", "F60", "F90", "F115", "F150", "F200", "F250"]


def test_models_without_range_never_match(small_taxonomy: VehicleTaxonomy) -> None:
    assert small_taxonomy.models_for_type_year_and_make("Boats", 2022, "Acme", 2025) == ["New"]


def test_years_window_is_configurable(small_taxonomy: VehicleTaxonomy) -> None:
    """Window of 10 at 2025 starts at 2016, so Old (2000-2005) contributes nothing."""
    assert small_taxonomy.years_for_type("Boats", 2025) == [2025, 2024, 2023, 2022, 2021, 2020]


def test_ghost_make_never_matches_a_year(small_taxonomy: VehicleTaxonomy) -> None:
    assert small_taxonomy.makes_for_type_and_year("Boats", 2022, 2025) == ["Acme"]


# ==============================================================================
# next_options
# ==============================================================================


def test_next_options_empty_selection(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.next_options(VehicleSelection(), CURRENT_YEAR) == VehicleOptions()


def test_next_options_type_only(taxonomy: VehicleTaxonomy) -> None:
    options = taxonomy.next_options(VehicleSelection(vehicle_type=CARS_AND_TRUCKS), CURRENT_YEAR)

    assert options.years
    assert options.makes == taxonomy.makes_for_type(CARS_AND_TRUCKS)
    assert options.models == []


def test_next_options_type_and_year_narrows_makes(taxonomy: VehicleTaxonomy) -> None:
    options = taxonomy.next_options(
        VehicleSelection(vehicle_type=CARS_AND_TRUCKS, year=2018), CURRENT_YEAR
    )

    assert options.makes == ["Honda", "Toyota", "Ford"]
    assert options.models == []


def test_next_options_full_selection_lists_models(taxonomy: VehicleTaxonomy) -> None:
    options = taxonomy.next_options(
        VehicleSelection(vehicle_type=CARS_AND_TRUCKS, year=2021, make="Honda"), CURRENT_YEAR
    )

    assert "Civic" in options.models
    assert "Fit" not in options.models


def test_next_options_make_does_not_narrow_years_or_makes(taxonomy: VehicleTaxonomy) -> None:
    """Selecting a make leaves years and makes as they were for type and year."""
    with_year = taxonomy.next_options(
        VehicleSelection(vehicle_type=MOTORCYCLES, year=2015), CURRENT_YEAR
    )
    with_make = taxonomy.next_options(
        VehicleSelection(vehicle_type=MOTORCYCLES, year=2015, make="Yamaha"), CURRENT_YEAR
    )

    assert with_make.years == with_year.years
    assert with_make.makes == with_year.makes


def test_next_options_unknown_type_is_empty(taxonomy: VehicleTaxonomy) -> None:
    options = taxonomy.next_options(VehicleSelection(vehicle_type="Spaceships"), CURRENT_YEAR)

    assert options == VehicleOptions()


# ==============================================================================
# is_valid_selection
# ==============================================================================


def test_civic_2018_is_valid(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.is_valid_selection(CARS_AND_TRUCKS, 2018, "Honda", "Civic", CURRENT_YEAR)


def test_fit_after_end_year_is_invalid(taxonomy: VehicleTaxonomy) -> None:
    assert taxonomy.is_valid_selection(CARS_AND_TRUCKS, 2020, "Honda", "Fit", CURRENT_YEAR)
    assert not taxonomy.is_valid_selection(CARS_AND_TRUCKS, 2021, "Honda", "Fit", CURRENT_YEAR)


def test_year_outside_window_is_invalid(taxonomy: VehicleTaxonomy) -> None:
    """Civic was produced in 1990 but the selector window starts at 1996."""
    assert not taxonomy.is_valid_selection(CARS_AND_TRUCKS, 1990, "Honda", "Civic", CURRENT_YEAR)


def test_future_year_is_invalid(taxonomy: VehicleTaxonomy) -> None:
    assert not taxonomy.is_valid_selection(CARS_AND_TRUCKS, 2026, "Honda", "Civic", CURRENT_YEAR)


@pytest.mark.parametrize(
    ("vehicle_type", "make", "model"),
    [
        ("Spaceships", "Honda", "Civic"),
        (CARS_AND_TRUCKS, "Tesla", "Model 3"),
        (CARS_AND_TRUCKS, "Honda", "Corolla"),
        (MOTORCYCLES, "Honda", "Civic"),
    ],
)
def test_mismatched_tuples_are_invalid(
    taxonomy: VehicleTaxonomy, vehicle_type: str, make: str, model: str
) -> None:
    assert not taxonomy.is_valid_selection(vehicle_type, 2018, make, model, CURRENT_YEAR)


def test_every_listed_model_is_a_valid_selection(taxonomy: VehicleTaxonomy) -> None:
    """Whatever the cascade offers is accepted by is_valid_selection."""
    for vehicle_type in taxonomy.vehicle_types():
        for year in taxonomy.years_for_type(vehicle_type, CURRENT_YEAR):
            for make in taxonomy.makes_for_type_and_year(vehicle_type, year, CURRENT_YEAR):
                for model in taxonomy.models_for_type_year_and_make(
                    vehicle_type, year, make, CURRENT_YEAR
                ):
                    assert taxonomy.is_valid_selection(
                        vehicle_type, year, make, model, CURRENT_YEAR
                    )


def test_every_range_key_refers_to_a_declared_model(taxonomy: VehicleTaxonomy) -> None:
    for vehicle_type, make, model in PRODUCTION_RANGES:
        assert model in taxonomy.models_for_type_and_make(vehicle_type, make)
