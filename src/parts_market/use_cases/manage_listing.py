"""Seller-side listing use cases: create, update, soft delete."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from parts_market.domain.errors import ForbiddenError, NotFoundError
from parts_market.domain.listing import (
    Listing,
    ListingDraft,
    ListingValidationError,
    listing_field_errors,
)
from parts_market.domain.vehicle_taxonomy import VehicleTaxonomy
from parts_market.ports.listing_repository import ListingRepository

logger = logging.getLogger(__name__)

VEHICLE_FIELDS = ("vehicle_type", "year", "make", "model")

# Fields a seller may change after publishing
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "vehicle_type",
        "year",
        "make",
        "model",
        "car_model",
        "condition",
        "price",
        "images",
    }
)


def vehicle_errors(
    taxonomy: VehicleTaxonomy,
    current_year: int,
    vehicle_type: str | None,
    year: int | None,
    make: str | None,
    model: str | None,
) -> list[dict[str, str]]:
    """
    Vehicle attributes are optional as a group: either none of them or all
    four, forming a selection the taxonomy accepts.
    """
    values = (vehicle_type, year, make, model)

    if all(value is None for value in values):
        return []

    missing = [name for name, value in zip(VEHICLE_FIELDS, values) if value is None]
    if missing:
        return [
            {
                "field": name,
                "message": "Required when any vehicle attribute is given",
                "code": "REQUIRED",
            }
            for name in missing
        ]

    if not taxonomy.is_valid_selection(vehicle_type, year, make, model, current_year):  # type: ignore[arg-type]
        return [
            {
                "field": "vehicle",
                "message": f"Unknown vehicle: {year} {make} {model} ({vehicle_type})",
                "code": "INVALID_VEHICLE",
            }
        ]

    return []


@dataclass(frozen=True, slots=True)
class CreateListingRequest:
    draft: ListingDraft


class CreateListing:
    """Publish a listing owned by the requesting seller."""

    def __init__(
        self,
        listing_repository: ListingRepository,
        taxonomy: VehicleTaxonomy,
        current_year: int,
    ) -> None:
        self._repository = listing_repository
        self._taxonomy = taxonomy
        self._current_year = current_year

    def execute(self, request: CreateListingRequest) -> Listing:
        """
        Raises:
            ListingValidationError: If listing fields or the vehicle tuple are invalid
        """
        draft = request.draft
        errors = listing_field_errors(
            name=draft.name,
            condition=draft.condition,
            price=draft.price,
            images=draft.images,
        )
        errors += vehicle_errors(
            self._taxonomy,
            self._current_year,
            draft.vehicle_type,
            draft.year,
            draft.make,
            draft.model,
        )
        if errors:
            raise ListingValidationError(errors=errors)

        listing = self._repository.create(draft)

        logger.info(
            "Listing created",
            extra={"listing_id": listing.id, "seller_id": listing.seller_id},
        )
        return listing


@dataclass(frozen=True, slots=True)
class UpdateListingRequest:
    listing_id: str
    actor_id: str
    changes: dict[str, Any] = field(default_factory=dict)


class UpdateListing:
    """
    Change fields of a listing.

    Only the owning seller may update. The merged listing must satisfy the
    same invariants as a new one.
    """

    def __init__(
        self,
        listing_repository: ListingRepository,
        taxonomy: VehicleTaxonomy,
        current_year: int,
    ) -> None:
        self._repository = listing_repository
        self._taxonomy = taxonomy
        self._current_year = current_year

    def execute(self, request: UpdateListingRequest) -> Listing:
        """
        Raises:
            NotFoundError: If the listing doesn't exist
            ForbiddenError: If the actor doesn't own the listing
            ListingValidationError: If the changes break a listing invariant
        """
        current = _owned_listing(self._repository, request.listing_id, request.actor_id)

        read_only = sorted(set(request.changes) - EDITABLE_FIELDS)
        if read_only:
            raise ListingValidationError(
                errors=[
                    {"field": name, "message": "Field cannot be changed", "code": "READ_ONLY"}
                    for name in read_only
                ]
            )

        changes = dict(request.changes)
        if "images" in changes:
            changes["images"] = tuple(changes["images"] or ())

        merged = replace(current, **changes)
        errors = listing_field_errors(
            name=merged.name,
            condition=merged.condition,
            price=merged.price,
            images=merged.images,
        )
        if any(name in changes for name in VEHICLE_FIELDS):
            errors += vehicle_errors(
                self._taxonomy,
                self._current_year,
                merged.vehicle_type,
                merged.year,
                merged.make,
                merged.model,
            )
        if errors:
            raise ListingValidationError(errors=errors)

        listing = self._repository.update(request.listing_id, changes)

        logger.info(
            "Listing updated",
            extra={"listing_id": listing.id, "fields": sorted(changes)},
        )
        return listing


@dataclass(frozen=True, slots=True)
class DeleteListingRequest:
    listing_id: str
    actor_id: str


class DeleteListing:
    """Soft delete: the listing is deactivated, never removed."""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, request: DeleteListingRequest) -> None:
        """
        Raises:
            NotFoundError: If the listing doesn't exist
            ForbiddenError: If the actor doesn't own the listing
        """
        _owned_listing(self._repository, request.listing_id, request.actor_id)

        self._repository.soft_delete(request.listing_id)

        logger.info("Listing deactivated", extra={"listing_id": request.listing_id})


def _owned_listing(repository: ListingRepository, listing_id: str, actor_id: str) -> Listing:
    found = repository.get_by_id(listing_id)

    if found is None:
        raise NotFoundError(resource="Part", identifier=listing_id)
    if found.listing.seller_id != actor_id:
        raise ForbiddenError("Only the seller who owns this part can change it")

    return found.listing
