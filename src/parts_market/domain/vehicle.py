from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ProductionRange:
    """Inclusive span of model years; end_year None means still in production."""

    start_year: int
    end_year: int | None = None

    def __post_init__(self) -> None:
        if self.end_year is not None and self.start_year > self.end_year:
            raise ValueError("start_year cannot be greater than end_year")


@dataclass(frozen=True, slots=True)
class VehicleSelection:
    """Partial selection made in the cascading vehicle selector."""

    vehicle_type: str | None = None
    year: int | None = None
    make: str | None = None


@dataclass(frozen=True, slots=True)
class VehicleOptions:
    years: list[int] = field(default_factory=list)
    makes: list[str] = field(default_factory=list)
    models: list[str] = field(default_factory=list)
