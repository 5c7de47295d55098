from __future__ import annotations

import os
from datetime import datetime, timezone


def current_year() -> int:
    """
    Reference year for the vehicle taxonomy.

    PARTS_MARKET_CURRENT_YEAR pins the year (useful for demos and fixtures);
    otherwise the UTC calendar year is used.
    """
    override = os.getenv("PARTS_MARKET_CURRENT_YEAR")

    if override:
        try:
            return int(override)
        except ValueError:
            raise RuntimeError(
                f"PARTS_MARKET_CURRENT_YEAR must be an integer, got {override!r}"
            ) from None

    return datetime.now(timezone.utc).year
