from pydantic import BaseModel, Field


class VehicleOptionsQueryDTO(BaseModel):
    """Current partial selection of the cascading vehicle selector."""

    vehicle_type: str | None = Field(default=None, examples=["Cars & Trucks"])
    year: int | None = Field(default=None, examples=[2018])
    make: str | None = Field(default=None, examples=["Honda"])


class VehicleOptionsResponseDTO(BaseModel):
    years: list[int]
    makes: list[str]
    models: list[str]


class VehicleTypesResponseDTO(BaseModel):
    vehicle_types: list[str]


class VehicleValidationQueryDTO(BaseModel):
    vehicle_type: str = Field(examples=["Cars & Trucks"])
    year: int = Field(examples=[2018])
    make: str = Field(examples=["Honda"])
    model: str = Field(examples=["Civic"])


class VehicleValidationResponseDTO(BaseModel):
    valid: bool
