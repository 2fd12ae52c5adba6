"""Tests for listing create/read/filter/update/delete."""

from unittest.mock import patch

import aiosqlite
import pytest
import pytest_asyncio

from sitconnect.listings.types import ALL_TYPES, Listing, SitterType
from sitconnect.persistence.database import Database
from sitconnect.persistence.repository import Repository

from tests.fixtures.listings import create_listings, listing_fields


class TestCreateAndGet:
    """Creating listings and reading them back."""

    @pytest.mark.asyncio
    async def test_get_after_create_returns_input(self, repo):
        fields = listing_fields(sitter_type=SitterType.HOUSE)
        listing_id = await repo.create_listing(**fields)

        listing = await repo.get_listing(listing_id)

        assert isinstance(listing, Listing)
        assert listing.id == listing_id
        assert listing.creator_role_id == fields["creator_role_id"]
        assert listing.sitter_type is SitterType.HOUSE
        assert listing.location == fields["location"]
        assert listing.start_date == fields["start_date"]
        assert listing.end_date == fields["end_date"]
        assert listing.description == fields["description"]
        assert listing.created_at

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, repo):
        ids = await create_listings(repo, [{}, {}, {}])
        assert len(set(ids)) == 3

    @pytest.mark.asyncio
    async def test_sitter_type_accepts_string(self, repo):
        listing_id = await repo.create_listing(**listing_fields(sitter_type="both"))
        listing = await repo.get_listing(listing_id)
        assert listing.sitter_type is SitterType.BOTH

    @pytest.mark.asyncio
    async def test_unknown_sitter_type_rejected(self, repo):
        with pytest.raises(ValueError):
            await repo.create_listing(**listing_fields(sitter_type="plants"))
        assert await repo.get_all_listings() == []

    @pytest.mark.asyncio
    async def test_end_date_before_start_date_is_stored(self, repo):
        listing_id = await repo.create_listing(
            **listing_fields(start_date="2025-06-10", end_date="2025-06-01")
        )
        listing = await repo.get_listing(listing_id)
        assert listing.end_date == "2025-06-01"

    @pytest.mark.asyncio
    async def test_get_missing_listing_returns_none(self, repo):
        assert await repo.get_listing(9999) is None


class TestOrdering:
    """Listings come back newest first."""

    @pytest.mark.asyncio
    async def test_get_by_creator_returns_only_creator_newest_first(self, repo):
        ids = await create_listings(
            repo,
            [
                {"creator_role_id": 1, "location": "A"},
                {"creator_role_id": 1, "location": "B"},
                {"creator_role_id": 2, "location": "Other"},
                {"creator_role_id": 1, "location": "C"},
            ],
        )

        listings = await repo.get_listings_by_creator(1)

        assert [l.id for l in listings] == [ids[3], ids[1], ids[0]]
        assert [l.location for l in listings] == ["C", "B", "A"]

    @pytest.mark.asyncio
    async def test_get_by_creator_without_listings(self, repo):
        await create_listings(repo, [{"creator_role_id": 1}])
        assert await repo.get_listings_by_creator(42) == []

    @pytest.mark.asyncio
    async def test_get_all_orders_by_created_at(self, repo):
        timestamps = iter([
            "2025-01-03T00:00:00.000Z",
            "2025-01-01T00:00:00.000Z",
            "2025-01-02T00:00:00.000Z",
        ])
        with patch(
            "sitconnect.persistence.repository.now_iso",
            side_effect=lambda: next(timestamps),
        ):
            ids = await create_listings(repo, [{}, {}, {}])

        listings = await repo.get_all_listings()

        assert [l.id for l in listings] == [ids[0], ids[2], ids[1]]

    @pytest.mark.asyncio
    async def test_get_all_includes_seed(self, seeded_repo):
        listings = await seeded_repo.get_all_listings()
        assert len(listings) == 5


class TestFilterByType:
    """BOTH listings satisfy the PET and HOUSE filters."""

    @pytest_asyncio.fixture
    async def typed_ids(self, repo):
        ids = await create_listings(
            repo,
            [
                {"sitter_type": SitterType.PET},
                {"sitter_type": SitterType.HOUSE},
                {"sitter_type": SitterType.BOTH},
                {"sitter_type": SitterType.PET},
            ],
        )
        return dict(zip(["pet1", "house", "both", "pet2"], ids))

    @pytest.mark.asyncio
    async def test_pet_includes_both(self, repo, typed_ids):
        listings = await repo.filter_listings_by_type(SitterType.PET)
        assert [l.id for l in listings] == [
            typed_ids["pet2"], typed_ids["both"], typed_ids["pet1"],
        ]

    @pytest.mark.asyncio
    async def test_house_includes_both(self, repo, typed_ids):
        listings = await repo.filter_listings_by_type(SitterType.HOUSE)
        assert [l.id for l in listings] == [typed_ids["both"], typed_ids["house"]]

    @pytest.mark.asyncio
    async def test_both_only_both(self, repo, typed_ids):
        listings = await repo.filter_listings_by_type(SitterType.BOTH)
        assert [l.id for l in listings] == [typed_ids["both"]]

    @pytest.mark.asyncio
    async def test_all_matches_get_all(self, repo, typed_ids):
        assert await repo.filter_listings_by_type(ALL_TYPES) == await repo.get_all_listings()

    @pytest.mark.asyncio
    async def test_string_type(self, repo, typed_ids):
        listings = await repo.filter_listings_by_type("house")
        assert {l.sitter_type for l in listings} == {SitterType.HOUSE, SitterType.BOTH}

    @pytest.mark.asyncio
    async def test_seed_filter(self, seeded_repo):
        pet = await seeded_repo.filter_listings_by_type(SitterType.PET)
        house = await seeded_repo.filter_listings_by_type(SitterType.HOUSE)
        assert len(pet) == 3
        assert len(house) == 3
        assert all(l.sitter_type.matches(SitterType.PET) for l in pet)


class TestUpdate:
    """Updating mutable fields."""

    @pytest.mark.asyncio
    async def test_update_overwrites_mutable_fields(self, repo):
        listing_id = await repo.create_listing(**listing_fields(creator_role_id=5))
        before = await repo.get_listing(listing_id)

        await repo.update_listing(
            listing_id,
            SitterType.BOTH,
            "George, Western Cape",
            "2025-07-01",
            "2025-07-15",
            "Dog walking and plant watering.",
        )
        after = await repo.get_listing(listing_id)

        assert after.sitter_type is SitterType.BOTH
        assert after.location == "George, Western Cape"
        assert after.start_date == "2025-07-01"
        assert after.end_date == "2025-07-15"
        assert after.description == "Dog walking and plant watering."
        assert after.id == before.id
        assert after.creator_role_id == 5
        assert after.created_at == before.created_at

    @pytest.mark.asyncio
    async def test_update_missing_id_is_noop(self, seeded_repo):
        before = await seeded_repo.get_all_listings()

        await seeded_repo.update_listing(
            9999, SitterType.PET, "Nowhere", "2025-01-01", "2025-01-02", "None"
        )

        assert await seeded_repo.get_all_listings() == before


class TestDelete:
    """Deleting listings and their bookmarks."""

    @pytest.mark.asyncio
    async def test_delete_removes_listing(self, repo):
        keep_id, drop_id = await create_listings(repo, [{}, {}])

        await repo.delete_listing(drop_id)

        assert await repo.get_listing(drop_id) is None
        assert [l.id for l in await repo.get_all_listings()] == [keep_id]

    @pytest.mark.asyncio
    async def test_delete_cascades_to_bookmarks(self, repo):
        keep_id, drop_id = await create_listings(repo, [{}, {}])
        await repo.save_listing(drop_id, sitter_role_id=2)
        await repo.save_listing(drop_id, sitter_role_id=3)
        await repo.save_listing(keep_id, sitter_role_id=2)

        await repo.delete_listing(drop_id)

        assert [l.id for l in await repo.get_saved_listings(2)] == [keep_id]
        assert await repo.get_saved_listings(3) == []
        assert not await repo.is_listing_saved(drop_id, 2)

    @pytest.mark.asyncio
    async def test_delete_missing_id(self, repo):
        await repo.delete_listing(9999)


class TestFailures:
    """Store errors reach the caller unchanged."""

    @pytest.mark.asyncio
    async def test_corrupt_sitter_type_raises(self, empty_db, repo):
        await empty_db.execute(
            """
            INSERT INTO listings
            (creatorRoleId, sitterType, location, startDate, endDate,
             description, createdAt)
            VALUES (1, 'garden', 'X', '2025-01-01', '2025-01-02', 'Y', '2025-01-01T00:00:00.000Z')
            """
        )
        await empty_db.commit()

        with pytest.raises(ValueError):
            await repo.get_all_listings()

    @pytest.mark.asyncio
    async def test_missing_table_propagates(self, db_path):
        db = Database(db_path)
        try:
            with pytest.raises(aiosqlite.OperationalError):
                await Repository(db).get_all_listings()
        finally:
            await db.close()
