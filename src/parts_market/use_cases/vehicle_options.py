from __future__ import annotations

from dataclasses import dataclass

from parts_market.domain.vehicle import VehicleOptions, VehicleSelection
from parts_market.domain.vehicle_taxonomy import VehicleTaxonomy


class GetVehicleOptions:
    """Next valid options for the cascading vehicle selector."""

    def __init__(self, taxonomy: VehicleTaxonomy, current_year: int) -> None:
        self._taxonomy = taxonomy
        self._current_year = current_year

    def vehicle_types(self) -> list[str]:
        return self._taxonomy.vehicle_types()

    def execute(self, selection: VehicleSelection) -> VehicleOptions:
        return self._taxonomy.next_options(selection, self._current_year)


@dataclass(frozen=True, slots=True)
class ValidateVehicleRequest:
    vehicle_type: str
    year: int
    make: str
    model: str


class ValidateVehicleSelection:
    def __init__(self, taxonomy: VehicleTaxonomy, current_year: int) -> None:
        self._taxonomy = taxonomy
        self._current_year = current_year

    def execute(self, request: ValidateVehicleRequest) -> bool:
        return self._taxonomy.is_valid_selection(
            request.vehicle_type,
            request.year,
            request.make,
            request.model,
            self._current_year,
        )
