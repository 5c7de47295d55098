"""
Static vehicle reference data used by the cascading vehicle selector.

Tables:
- VEHICLE_TYPES: ordered vehicle categories
- MAKES: vehicle type → ordered makes
- MODELS: (vehicle type, make) → ordered models
- PRODUCTION_RANGES: (vehicle type, make, model) → ProductionRange

Makes without models and models without a production range are listed on
purpose: they show up in the unfiltered lookups but never match a year.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from parts_market.domain.vehicle import ProductionRange

CARS_AND_TRUCKS = "Cars & Trucks"
MOTORCYCLES = "Motorcycles"
HEAVY_VEHICLES = "Heavy Vehicles"
MARINE_VEHICLES = "Marine Vehicles"

VEHICLE_TYPES: tuple[str, ...] = (
    CARS_AND_TRUCKS,
    MOTORCYCLES,
    HEAVY_VEHICLES,
    MARINE_VEHICLES,
)

# Number of model years offered by the selector, counting the current year
YEAR_WINDOW = 30


# ==============================================================================
# Makes
# ==============================================================================

MAKES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        CARS_AND_TRUCKS: (
            "Honda",
            "Toyota",
            "Nissan",
            "Ford",
            "Hyundai",
            "Mercedes-Benz",
            "BMW",
            "Audi",
            "Volkswagen",
            "Mazda",
            "Chevrolet",
            "Kia",
            "Peugeot",
        ),
        MOTORCYCLES: (
            "Honda",
            "Yamaha",
            "Suzuki",
            "Kawasaki",
            "Bajaj",
            "TVS",
            "Royal Enfield",
            "KTM",
            "Ducati",
            "Harley-Davidson",
        ),
        HEAVY_VEHICLES: (
            "Mercedes-Benz",
            "Volvo",
            "MAN",
            "Scania",
            "DAF",
            "Iveco",
            "Isuzu",
            "Mitsubishi Fuso",
        ),
        MARINE_VEHICLES: (
            "Yamaha",
            "Mercury",
            "Honda",
            "Suzuki",
            "Johnson",
            "Evinrude",
            "Tohatsu",
        ),
    }
)


# ==============================================================================
# Models
# ==============================================================================

MODELS: Mapping[tuple[str, str], tuple[str, ...]] = MappingProxyType(
    {
        (CARS_AND_TRUCKS, "Honda"): (
            "Accord", "Civic", "CR-V", "Pilot", "Fit",
            "HR-V", "Ridgeline", "Passport", "Insight", "Odyssey",
        ),
        (CARS_AND_TRUCKS, "Toyota"): (
            "Camry", "Corolla", "RAV4", "Highlander", "Prius",
            "Tacoma", "Tundra", "4Runner", "Sienna", "Avalon",
        ),
        (CARS_AND_TRUCKS, "Nissan"): (
            "Altima", "Sentra", "Rogue", "Pathfinder", "Frontier",
            "Titan", "Versa", "Murano", "Armada", "Leaf",
        ),
        (CARS_AND_TRUCKS, "Ford"): (
            "F-150", "Escape", "Explorer", "Focus", "Mustang",
            "Edge", "Expedition", "Ranger", "Fusion", "Bronco",
        ),
        (CARS_AND_TRUCKS, "Hyundai"): (
            "Elantra", "Sonata", "Tucson", "Santa Fe", "Accent",
            "Palisade", "Kona", "Venue", "Genesis", "Veloster",
        ),
        (CARS_AND_TRUCKS, "Mercedes-Benz"): (
            "C-Class", "E-Class", "S-Class", "GLC", "GLE",
            "GLS", "A-Class", "CLA", "GLA", "G-Class",
        ),
        (CARS_AND_TRUCKS, "BMW"): (
            "3 Series", "5 Series", "7 Series", "X3", "X5",
            "X7", "1 Series", "X1", "Z4", "i3",
        ),
        (MOTORCYCLES, "Honda"): (
            "CBR600RR", "CBR1000RR", "CB650R", "CB1000R", "CRF450L",
            "Gold Wing", "Rebel 500", "Africa Twin", "CBR300R", "Grom",
        ),
        (MOTORCYCLES, "Yamaha"): (
            "YZF-R1", "YZF-R6", "MT-07", "MT-09", "YZ450F",
            "FJR1300", "Bolt", "Tenere 700", "YZF-R3", "VMAX",
        ),
        (MOTORCYCLES, "Suzuki"): (
            "GSX-R1000", "GSX-R600", "SV650", "V-Strom 650", "Hayabusa",
            "Boulevard", "DR-Z400SM", "GSX-S750", "Katana", "RM-Z450",
        ),
        (MOTORCYCLES, "Kawasaki"): (
            "Ninja ZX-10R", "Ninja ZX-6R", "Z900", "Versys 650", "KX450",
            "Vulcan", "Ninja 400", "Z650", "KLR650", "Concours 14",
        ),
        (HEAVY_VEHICLES, "Mercedes-Benz"): (
            "Actros", "Antos", "Arocs", "Atego", "Econic", "Sprinter", "Vito", "Citan",
        ),
        (HEAVY_VEHICLES, "Volvo"): (
            "FH", "FM", "FE", "FL", "VNL", "VNR", "VHD", "VAH",
        ),
        (MARINE_VEHICLES, "Yamaha"): (
            "F25", "F40", "F60", "F90", "F115",
            "F150", "F200", "F250", "F300", "F350",
        ),
        (MARINE_VEHICLES, "Mercury"): (
            "FourStroke 25", "FourStroke 40", "FourStroke 60", "FourStroke 90",
            "FourStroke 115", "Verado 200", "Verado 250", "Verado 300",
        ),
    }
)


# ==============================================================================
# Production Ranges
# ==============================================================================


def _ranges(
    vehicle_type: str,
    make: str,
    spans: dict[str, tuple[int, int | None]],
) -> dict[tuple[str, str, str], ProductionRange]:
    return {
        (vehicle_type, make, model): ProductionRange(start_year=start, end_year=end)
        for model, (start, end) in spans.items()
    }


PRODUCTION_RANGES: Mapping[tuple[str, str, str], ProductionRange] = MappingProxyType(
    {
        **_ranges(
            CARS_AND_TRUCKS,
            "Honda",
            {
                "Accord": (1976, None),
                "Civic": (1972, None),
                "CR-V": (1995, None),
                "Pilot": (2003, None),
                "Fit": (2007, 2020),
                "HR-V": (2016, None),
                "Ridgeline": (2006, None),
                "Passport": (2019, None),
                "Insight": (1999, None),
                "Odyssey": (1995, None),
            },
        ),
        **_ranges(
            CARS_AND_TRUCKS,
            "Toyota",
            {
                "Camry": (1982, None),
                "Corolla": (1966, None),
                "RAV4": (1994, None),
                "Highlander": (2001, None),
                "Prius": (1997, None),
                "Tacoma": (1995, None),
                "Tundra": (2000, None),
                "4Runner": (1984, None),
                "Sienna": (1998, None),
                "Avalon": (1995, 2022),
            },
        ),
        **_ranges(
            CARS_AND_TRUCKS,
            "Ford",
            {
                "F-150": (1975, None),
                "Escape": (2001, None),
                "Explorer": (1991, None),
                "Focus": (1998, 2018),
                "Mustang": (1964, None),
                "Edge": (2007, None),
                "Expedition": (1997, None),
                "Ranger": (1983, None),
                "Fusion": (2006, 2020),
                "Bronco": (1966, None),
            },
        ),
        **_ranges(
            MOTORCYCLES,
            "Honda",
            {
                "CBR600RR": (2003, None),
                "CBR1000RR": (2004, None),
                "CB650R": (2019, None),
                "CB1000R": (2008, None),
                "CRF450L": (2019, None),
                "Gold Wing": (1975, None),
                "Rebel 500": (2017, None),
                "Africa Twin": (2016, None),
                "CBR300R": (2015, None),
                "Grom": (2014, None),
            },
        ),
        **_ranges(
            MOTORCYCLES,
            "Yamaha",
            {
                "YZF-R1": (1998, None),
                "YZF-R6": (1999, None),
                "MT-07": (2014, None),
                "MT-09": (2014, None),
                "YZ450F": (2003, None),
                "FJR1300": (2001, None),
                "Bolt": (2014, None),
                "Tenere 700": (2020, None),
                "YZF-R3": (2015, None),
                "VMAX": (1985, None),
            },
        ),
        **_ranges(
            MARINE_VEHICLES,
            "Yamaha",
            {
                "F25": (2005, None),
                "F40": (2000, None),
                "F60": (2004, None),
                "F90": (2006, None),
                "F115": (2000, None),
                "F150": (2004, None),
                "F200": (2002, None),
                "F250": (2007, None),
                "F300": (2011, None),
                "F350": (2014, None),
            },
        ),
    }
)
