"""
Test suite for CreateListing, UpdateListing and DeleteListing.

Uses the in-memory repositories and the bundled taxonomy with the year
pinned, so vehicle validation is deterministic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from parts_market.adapters.in_memory_listing_repository import InMemoryListingRepository
from parts_market.domain.errors import ForbiddenError, NotFoundError
from parts_market.domain.listing import (
    Listing,
    ListingDraft,
    ListingFilters,
    ListingValidationError,
)
from parts_market.domain.seller import User
from parts_market.domain.vehicle_taxonomy import VehicleTaxonomy
from parts_market.use_cases.manage_listing import (
    CreateListing,
    CreateListingRequest,
    DeleteListing,
    DeleteListingRequest,
    UpdateListing,
    UpdateListingRequest,
    vehicle_errors,
)

CURRENT_YEAR = 2025
CARS = "Cars & Trucks"


@pytest.fixture()
def taxonomy() -> VehicleTaxonomy:
    return VehicleTaxonomy()


@pytest.fixture()
def listings() -> list[Listing]:
    return [
        Listing(
            id="civic-pads",
            seller_id="owner",
            name="Brake Pads",
            condition="used",
            vehicle_type=CARS,
            year=2018,
            make="Honda",
            model="Civic",
            price=Decimal("45.00"),
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
    ]


@pytest.fixture()
def repo(listings: list[Listing]) -> InMemoryListingRepository:
    users = [User(id="owner", seller_type="private"), User(id="intruder")]
    return InMemoryListingRepository(listings=listings, users=users)


@pytest.fixture()
def create(repo: InMemoryListingRepository, taxonomy: VehicleTaxonomy) -> CreateListing:
    return CreateListing(listing_repository=repo, taxonomy=taxonomy, current_year=CURRENT_YEAR)


@pytest.fixture()
def update(repo: InMemoryListingRepository, taxonomy: VehicleTaxonomy) -> UpdateListing:
    return UpdateListing(listing_repository=repo, taxonomy=taxonomy, current_year=CURRENT_YEAR)


def draft(**overrides: object) -> ListingDraft:
    fields: dict[str, object] = {"seller_id": "owner", "name": "Alternator", "condition": "new"}
    fields.update(overrides)
    return ListingDraft(**fields)  # type: ignore[arg-type]


# ==============================================================================
# vehicle_errors
# ==============================================================================


def test_vehicle_errors_all_absent_is_fine(taxonomy: VehicleTaxonomy) -> None:
    assert vehicle_errors(taxonomy, CURRENT_YEAR, None, None, None, None) == []


def test_vehicle_errors_valid_tuple(taxonomy: VehicleTaxonomy) -> None:
    assert vehicle_errors(taxonomy, CURRENT_YEAR, CARS, 2018, "Honda", "Civic") == []


def test_vehicle_errors_partial_tuple_lists_missing_fields(taxonomy: VehicleTaxonomy) -> None:
    errors = vehicle_errors(taxonomy, CURRENT_YEAR, CARS, 2018, None, None)

    assert [error["field"] for error in errors] == ["make", "model"]
    assert all(error["code"] == "REQUIRED" for error in errors)


def test_vehicle_errors_unknown_tuple(taxonomy: VehicleTaxonomy) -> None:
    errors = vehicle_errors(taxonomy, CURRENT_YEAR, CARS, 2021, "Honda", "Fit")

    assert errors == [
        {
            "field": "vehicle",
            "message": "Unknown vehicle: 2021 Honda Fit (Cars & Trucks)",
            "code": "INVALID_VEHICLE",
        }
    ]


# ==============================================================================
# CreateListing
# ==============================================================================


def test_create_without_vehicle(create: CreateListing, repo: InMemoryListingRepository) -> None:
    listing = create.execute(CreateListingRequest(draft=draft(price=Decimal("120.00"))))

    assert listing.seller_id == "owner"
    assert listing.is_active is True
    assert repo.get_by_id(listing.id) is not None


def test_create_with_valid_vehicle(create: CreateListing) -> None:
    listing = create.execute(
        CreateListingRequest(
            draft=draft(vehicle_type=CARS, year=2019, make="Ford", model="Fusion")
        )
    )

    assert (listing.year, listing.make, listing.model) == (2019, "Ford", "Fusion")


def test_create_rejects_invalid_vehicle(
    create: CreateListing, repo: InMemoryListingRepository
) -> None:
    with pytest.raises(ListingValidationError) as exc_info:
        create.execute(
            CreateListingRequest(
                draft=draft(vehicle_type=CARS, year=2019, make="Ford", model="Focus")
            )
        )

    assert exc_info.value.errors[0]["code"] == "INVALID_VEHICLE"  # type: ignore[index]
    assert len(repo.list_all()) == 1


def test_create_collects_field_and_vehicle_errors(create: CreateListing) -> None:
    with pytest.raises(ListingValidationError) as exc_info:
        create.execute(
            CreateListingRequest(
                draft=draft(name="", price=Decimal("-1"), images=("1", "2", "3", "4"), year=2018)
            )
        )

    fields = [error["field"] for error in exc_info.value.errors or []]
    assert fields == ["name", "price", "images", "vehicle_type", "make", "model"]


def test_created_listing_appears_in_search(
    create: CreateListing, repo: InMemoryListingRepository
) -> None:
    listing = create.execute(CreateListingRequest(draft=draft(name="Starter Motor")))

    assert [item.listing.id for item in repo.search(ListingFilters(search="starter"))] == [
        listing.id
    ]


# ==============================================================================
# UpdateListing
# ==============================================================================


def test_update_by_owner(update: UpdateListing) -> None:
    listing = update.execute(
        UpdateListingRequest(
            listing_id="civic-pads",
            actor_id="owner",
            changes={"price": Decimal("40.00"), "images": ["a.jpg"]},
        )
    )

    assert listing.price == Decimal("40.00")
    assert listing.images == ("a.jpg",)
    assert listing.model == "Civic"


def test_update_by_other_user_is_forbidden(update: UpdateListing) -> None:
    with pytest.raises(ForbiddenError):
        update.execute(
            UpdateListingRequest(
                listing_id="civic-pads", actor_id="intruder", changes={"name": "Mine"}
            )
        )


def test_update_missing_listing_is_not_found(update: UpdateListing) -> None:
    with pytest.raises(NotFoundError):
        update.execute(UpdateListingRequest(listing_id="nope", actor_id="owner", changes={}))


def test_update_rejects_read_only_fields(update: UpdateListing) -> None:
    with pytest.raises(ListingValidationError) as exc_info:
        update.execute(
            UpdateListingRequest(
                listing_id="civic-pads",
                actor_id="owner",
                changes={"is_active": True, "seller_id": "intruder"},
            )
        )

    assert [error["field"] for error in exc_info.value.errors or []] == [
        "is_active",
        "seller_id",
    ]


def test_update_revalidates_merged_vehicle(update: UpdateListing) -> None:
    """Changing only the year re-checks it against the stored model."""
    with pytest.raises(ListingValidationError) as exc_info:
        update.execute(
            UpdateListingRequest(listing_id="civic-pads", actor_id="owner", changes={"year": 1990})
        )

    assert exc_info.value.errors[0]["code"] == "INVALID_VEHICLE"  # type: ignore[index]


def test_update_can_clear_vehicle(update: UpdateListing) -> None:
    listing = update.execute(
        UpdateListingRequest(
            listing_id="civic-pads",
            actor_id="owner",
            changes={"vehicle_type": None, "year": None, "make": None, "model": None},
        )
    )

    assert listing.vehicle_type is None
    assert listing.model is None


def test_update_rejects_empty_name(update: UpdateListing) -> None:
    with pytest.raises(ListingValidationError):
        update.execute(
            UpdateListingRequest(listing_id="civic-pads", actor_id="owner", changes={"name": " "})
        )


# ==============================================================================
# DeleteListing
# ==============================================================================


def test_delete_soft_deletes(repo: InMemoryListingRepository) -> None:
    DeleteListing(listing_repository=repo).execute(
        DeleteListingRequest(listing_id="civic-pads", actor_id="owner")
    )

    assert repo.search(ListingFilters()) == []
    assert repo.list_by_seller("owner") == []
    assert repo.get_by_id("civic-pads").listing.is_active is False  # type: ignore[union-attr]


def test_delete_by_other_user_is_forbidden(repo: InMemoryListingRepository) -> None:
    with pytest.raises(ForbiddenError):
        DeleteListing(listing_repository=repo).execute(
            DeleteListingRequest(listing_id="civic-pads", actor_id="intruder")
        )

    assert len(repo.search(ListingFilters())) == 1


def test_delete_missing_listing_is_not_found(repo: InMemoryListingRepository) -> None:
    with pytest.raises(NotFoundError):
        DeleteListing(listing_repository=repo).execute(
            DeleteListingRequest(listing_id="nope", actor_id="owner")
        )
