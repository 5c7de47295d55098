"""Test suite for the vehicle selector use cases."""

from __future__ import annotations

from unittest.mock import Mock

from parts_market.domain.vehicle import VehicleOptions, VehicleSelection
from parts_market.domain.vehicle_taxonomy import VehicleTaxonomy
from parts_market.use_cases.vehicle_options import (
    GetVehicleOptions,
    ValidateVehicleRequest,
    ValidateVehicleSelection,
)


def test_options_pass_current_year_to_taxonomy() -> None:
    taxonomy = Mock(spec=VehicleTaxonomy)
    taxonomy.next_options.return_value = VehicleOptions(years=[2025])
    selection = VehicleSelection(vehicle_type="Motorcycles")

    result = GetVehicleOptions(taxonomy=taxonomy, current_year=2025).execute(selection)

    assert result.years == [2025]
    taxonomy.next_options.assert_called_once_with(selection, 2025)


def test_vehicle_types() -> None:
    use_case = GetVehicleOptions(taxonomy=VehicleTaxonomy(), current_year=2025)

    assert use_case.vehicle_types()[0] == "Cars & Trucks"


def test_options_with_real_taxonomy() -> None:
    use_case = GetVehicleOptions(taxonomy=VehicleTaxonomy(), current_year=2025)

    options = use_case.execute(
        VehicleSelection(vehicle_type="Marine Vehicles", year=2012, make="Yamaha")
    )

    assert options.makes == ["Yamaha"]
    assert "F300" in options.models
    assert "F350" not in options.models


def test_validate_selection() -> None:
    use_case = ValidateVehicleSelection(taxonomy=VehicleTaxonomy(), current_year=2025)

    assert use_case.execute(
        ValidateVehicleRequest(vehicle_type="Cars & Trucks", year=2018, make="Honda", model="Civic")
    )
    assert not use_case.execute(
        ValidateVehicleRequest(vehicle_type="Cars & Trucks", year=2021, make="Honda", model="Fit")
    )
