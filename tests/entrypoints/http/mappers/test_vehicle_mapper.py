from parts_market.domain.vehicle import VehicleOptions, VehicleSelection
from parts_market.entrypoints.http.dtos.vehicles import VehicleOptionsQueryDTO
from parts_market.entrypoints.http.mappers.vehicle_mapper import VehicleMapper


def test_empty_strings_become_none() -> None:
    selection = VehicleMapper.to_selection(VehicleOptionsQueryDTO(vehicle_type="", make=""))

    assert selection == VehicleSelection()


def test_options_response() -> None:
    dto = VehicleMapper.to_options_response(VehicleOptions(years=[2025, 2024], makes=["Honda"]))

    assert dto.model_dump() == {"years": [2025, 2024], "makes": ["Honda"], "models": []}
