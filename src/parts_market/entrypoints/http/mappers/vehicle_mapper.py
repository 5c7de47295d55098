from __future__ import annotations

from parts_market.domain.vehicle import VehicleOptions, VehicleSelection
from parts_market.entrypoints.http.dtos.vehicles import (
    VehicleOptionsQueryDTO,
    VehicleOptionsResponseDTO,
    VehicleValidationQueryDTO,
)
from parts_market.use_cases.vehicle_options import ValidateVehicleRequest


class VehicleMapper:
    @staticmethod
    def to_selection(dto: VehicleOptionsQueryDTO) -> VehicleSelection:
        return VehicleSelection(
            vehicle_type=dto.vehicle_type or None,
            year=dto.year,
            make=dto.make or None,
        )

    @staticmethod
    def to_validate_request(dto: VehicleValidationQueryDTO) -> ValidateVehicleRequest:
        return ValidateVehicleRequest(
            vehicle_type=dto.vehicle_type,
            year=dto.year,
            make=dto.make,
            model=dto.model,
        )

    @staticmethod
    def to_options_response(options: VehicleOptions) -> VehicleOptionsResponseDTO:
        return VehicleOptionsResponseDTO(
            years=list(options.years),
            makes=list(options.makes),
            models=list(options.models),
        )
