"""Vehicle taxonomy lookups backing the cascading vehicle selector.

The cascade runs vehicle type → year → make → model. Every year-aware lookup
goes through ``ProductionRange`` data and the single ``effective_end_year``
helper, and takes ``current_year`` explicitly so results are deterministic.

Unknown vehicle types, makes, models or years never raise: they resolve to
empty lists (or ``False`` from ``is_valid_selection``).
"""

from __future__ import annotations

from typing import Mapping

from parts_market.domain import vehicle_reference_data as reference
from parts_market.domain.vehicle import ProductionRange, VehicleOptions, VehicleSelection


def effective_end_year(production_range: ProductionRange, current_year: int) -> int:
    """Last model year of a range, capped at the current year."""
    if production_range.end_year is None:
        return current_year
    return min(production_range.end_year, current_year)


def covers_year(production_range: ProductionRange, year: int, current_year: int) -> bool:
    return production_range.start_year <= year <= effective_end_year(
        production_range, current_year
    )


class VehicleTaxonomy:
    """
    Read-only lookups over the vehicle reference tables.

    Instances hold no mutable state and are safe to share between requests.
    The tables default to the bundled reference data; tests may pass smaller
    tables.
    """

    def __init__(
        self,
        vehicle_types: tuple[str, ...] = reference.VEHICLE_TYPES,
        makes: Mapping[str, tuple[str, ...]] = reference.MAKES,
        models: Mapping[tuple[str, str], tuple[str, ...]] = reference.MODELS,
        production_ranges: Mapping[
            tuple[str, str, str], ProductionRange
        ] = reference.PRODUCTION_RANGES,
        year_window: int = reference.YEAR_WINDOW,
    ) -> None:
        self._vehicle_types = vehicle_types
        self._makes = makes
        self._models = models
        self._production_ranges = production_ranges
        self._year_window = year_window

    # ==========================================================================
    # Unfiltered lookups
    # ==========================================================================

    def vehicle_types(self) -> list[str]:
        return list(self._vehicle_types)

    def makes_for_type(self, vehicle_type: str) -> list[str]:
        return list(self._makes.get(vehicle_type, ()))

    def models_for_type_and_make(self, vehicle_type: str, make: str) -> list[str]:
        return list(self._models.get((vehicle_type, make), ()))

    # ==========================================================================
    # Year-aware lookups
    # ==========================================================================

    def years_for_type(self, vehicle_type: str, current_year: int) -> list[int]:
        """
        Years in which at least one model of the vehicle type was produced.

        Limited to the selector window (current year and the 29 before it)
        and sorted most recent first.
        """
        oldest_year = current_year - self._year_window + 1
        years: set[int] = set()

        for make in self.makes_for_type(vehicle_type):
            for production_range in self._ranges_for(vehicle_type, make).values():
                first = max(production_range.start_year, oldest_year)
                last = effective_end_year(production_range, current_year)
                years.update(range(first, last + 1))

        return sorted(years, reverse=True)

    def makes_for_type_and_year(
        self, vehicle_type: str, year: int, current_year: int
    ) -> list[str]:
        return [
            make
            for make in self.makes_for_type(vehicle_type)
            if any(
                covers_year(production_range, year, current_year)
                for production_range in self._ranges_for(vehicle_type, make).values()
            )
        ]

    def models_for_type_year_and_make(
        self, vehicle_type: str, year: int, make: str, current_year: int
    ) -> list[str]:
        ranges = self._ranges_for(vehicle_type, make)
        return [
            model
            for model in self.models_for_type_and_make(vehicle_type, make)
            if model in ranges and covers_year(ranges[model], year, current_year)
        ]

    # ==========================================================================
    # Cascade
    # ==========================================================================

    def next_options(self, selection: VehicleSelection, current_year: int) -> VehicleOptions:
        """
        Options for every selector level given the current partial selection.

        Years depend on the vehicle type only and makes on the type and year
        only; selecting a make never narrows them. Models are offered only
        once type, year and make are all selected.
        """
        if not selection.vehicle_type:
            return VehicleOptions()

        vehicle_type = selection.vehicle_type
        years = self.years_for_type(vehicle_type, current_year)

        if selection.year is None:
            return VehicleOptions(years=years, makes=self.makes_for_type(vehicle_type))

        makes = self.makes_for_type_and_year(vehicle_type, selection.year, current_year)
        models: list[str] = []
        if selection.make:
            models = self.models_for_type_year_and_make(
                vehicle_type, selection.year, selection.make, current_year
            )

        return VehicleOptions(years=years, makes=makes, models=models)

    def is_valid_selection(
        self,
        vehicle_type: str,
        year: int,
        make: str,
        model: str,
        current_year: int,
    ) -> bool:
        """True when the full tuple is reachable through the cascade."""
        if vehicle_type not in self._vehicle_types:
            return False
        if year not in self.years_for_type(vehicle_type, current_year):
            return False
        if make not in self.makes_for_type_and_year(vehicle_type, year, current_year):
            return False
        return model in self.models_for_type_year_and_make(
            vehicle_type, year, make, current_year
        )

    def _ranges_for(self, vehicle_type: str, make: str) -> dict[str, ProductionRange]:
        """Declared models of the pair that have a registered production range."""
        ranges: dict[str, ProductionRange] = {}
        for model in self.models_for_type_and_make(vehicle_type, make):
            production_range = self._production_ranges.get((vehicle_type, make, model))
            if production_range is not None:
                ranges[model] = production_range
        return ranges
