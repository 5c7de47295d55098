from fastapi import APIRouter, Depends

from parts_market.entrypoints.http.dependencies import (
    get_validate_vehicle_use_case,
    get_vehicle_options_use_case,
)
from parts_market.entrypoints.http.dtos.vehicles import (
    VehicleOptionsQueryDTO,
    VehicleOptionsResponseDTO,
    VehicleTypesResponseDTO,
    VehicleValidationQueryDTO,
    VehicleValidationResponseDTO,
)
from parts_market.entrypoints.http.error_responses import error_responses
from parts_market.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from parts_market.use_cases.vehicle_options import GetVehicleOptions, ValidateVehicleSelection


router = APIRouter(prefix="/vehicles", tags=["Vehicles"])


@router.get(
    "/types",
    response_model=VehicleTypesResponseDTO,
    summary="List vehicle types",
)
def get_vehicle_types(
    use_case: GetVehicleOptions = Depends(get_vehicle_options_use_case),
) -> VehicleTypesResponseDTO:
    return VehicleTypesResponseDTO(vehicle_types=use_case.vehicle_types())


@router.get(
    "/options",
    response_model=VehicleOptionsResponseDTO,
    summary="Cascading selector options",
    description="""
    Options for the vehicle selector given the current partial selection.

    - No vehicle_type: everything empty
    - vehicle_type only: years of the type, all makes of the type
    - vehicle_type + year: makes narrowed to the year
    - vehicle_type + year + make: models produced that year

    Years are always those of the vehicle type within the last 30 years,
    most recent first. Unknown values yield empty lists, not errors.
    """,
    responses=error_responses(422),
)
def get_vehicle_options(
    query: VehicleOptionsQueryDTO = Depends(),
    use_case: GetVehicleOptions = Depends(get_vehicle_options_use_case),
) -> VehicleOptionsResponseDTO:
    options = use_case.execute(VehicleMapper.to_selection(query))
    return VehicleMapper.to_options_response(options)


@router.get(
    "/validate",
    response_model=VehicleValidationResponseDTO,
    summary="Validate a full vehicle selection",
    responses=error_responses(422),
)
def validate_vehicle(
    query: VehicleValidationQueryDTO = Depends(),
    use_case: ValidateVehicleSelection = Depends(get_validate_vehicle_use_case),
) -> VehicleValidationResponseDTO:
    valid = use_case.execute(VehicleMapper.to_validate_request(query))
    return VehicleValidationResponseDTO(valid=valid)
