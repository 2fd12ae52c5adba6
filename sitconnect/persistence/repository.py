"""Data access layer for listings and bookmarks."""

import logging

import aiosqlite

from sitconnect.listings.types import ALL_TYPES, Listing, SavedListing, SitterType
from sitconnect.monitor.logger import get_activity_logger
from sitconnect.persistence.database import Database
from sitconnect.persistence.models import now_iso

logger = logging.getLogger(__name__)
activity_logger = get_activity_logger()


def _row_to_listing(row: aiosqlite.Row) -> Listing:
    return Listing(
        id=row["id"],
        creator_role_id=row["creatorRoleId"],
        sitter_type=SitterType(row["sitterType"]),
        location=row["location"],
        start_date=row["startDate"],
        end_date=row["endDate"],
        description=row["description"],
        created_at=row["createdAt"],
    )


def _row_to_saved_listing(row: aiosqlite.Row) -> SavedListing:
    return SavedListing(
        id=row["id"],
        listing_id=row["listingId"],
        sitter_role_id=row["sitterRoleId"],
        saved_at=row["savedAt"],
    )


class Repository:
    """Data access layer for listings and saved listings.

    Every method issues a single statement. Store errors propagate to the
    caller unchanged.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    # --- Listing operations ---

    async def create_listing(
        self,
        creator_role_id: int,
        sitter_type: SitterType | str,
        location: str,
        start_date: str,
        end_date: str,
        description: str,
    ) -> int:
        """Insert a new listing and return its id."""
        sitter_type = SitterType(sitter_type)
        cursor = await self._db.execute(
            """
            INSERT INTO listings
            (creatorRoleId, sitterType, location, startDate, endDate,
             description, createdAt)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                creator_role_id,
                sitter_type.value,
                location,
                start_date,
                end_date,
                description,
                now_iso(),
            ),
        )
        await self._db.commit()
        listing_id = cursor.lastrowid
        activity_logger.info(
            "listing_created",
            extra={
                "listing_id": listing_id,
                "creator_role_id": creator_role_id,
                "sitter_type": sitter_type.value,
            },
        )
        return listing_id

    async def get_all_listings(self) -> list[Listing]:
        """Get all listings, newest first."""
        rows = await self._db.fetchall(
            "SELECT * FROM listings ORDER BY createdAt DESC, id DESC"
        )
        logger.debug("Fetched %d listings", len(rows))
        return [_row_to_listing(row) for row in rows]

    async def get_listings_by_creator(self, creator_role_id: int) -> list[Listing]:
        """Get listings posted by one requester, newest first."""
        rows = await self._db.fetchall(
            """
            SELECT * FROM listings
            WHERE creatorRoleId = ?
            ORDER BY createdAt DESC, id DESC
            """,
            (creator_role_id,),
        )
        return [_row_to_listing(row) for row in rows]

    async def get_listing(self, listing_id: int) -> Listing | None:
        """Get a listing by ID."""
        row = await self._db.fetchone(
            "SELECT * FROM listings WHERE id = ?",
            (listing_id,),
        )
        return _row_to_listing(row) if row else None

    async def filter_listings_by_type(
        self, sitter_type: SitterType | str
    ) -> list[Listing]:
        """
        Get listings matching a sitter type, newest first.

        Listings marked BOTH satisfy the PET and HOUSE filters. Passing
        "all" returns every listing.
        """
        if sitter_type == ALL_TYPES:
            return await self.get_all_listings()

        sitter_type = SitterType(sitter_type)
        rows = await self._db.fetchall(
            """
            SELECT * FROM listings
            WHERE sitterType = ? OR sitterType = ?
            ORDER BY createdAt DESC, id DESC
            """,
            (sitter_type.value, SitterType.BOTH.value),
        )
        logger.debug("Filtered to %d listings for type %s", len(rows), sitter_type.value)
        return [_row_to_listing(row) for row in rows]

    async def update_listing(
        self,
        listing_id: int,
        sitter_type: SitterType | str,
        location: str,
        start_date: str,
        end_date: str,
        description: str,
    ) -> None:
        """Overwrite the editable fields of a listing. Missing ids are ignored."""
        sitter_type = SitterType(sitter_type)
        cursor = await self._db.execute(
            """
            UPDATE listings SET
                sitterType = ?,
                location = ?,
                startDate = ?,
                endDate = ?,
                description = ?
            WHERE id = ?
            """,
            (
                sitter_type.value,
                location,
                start_date,
                end_date,
                description,
                listing_id,
            ),
        )
        await self._db.commit()
        if cursor.rowcount:
            activity_logger.info(
                "listing_updated",
                extra={"listing_id": listing_id, "sitter_type": sitter_type.value},
            )
        else:
            logger.debug("Update skipped, listing %d not found", listing_id)

    async def delete_listing(self, listing_id: int) -> None:
        """Delete a listing. Its bookmarks go with it (ON DELETE CASCADE)."""
        cursor = await self._db.execute(
            "DELETE FROM listings WHERE id = ?",
            (listing_id,),
        )
        await self._db.commit()
        if cursor.rowcount:
            activity_logger.info("listing_deleted", extra={"listing_id": listing_id})

    # --- Saved listing operations ---

    async def save_listing(self, listing_id: int, sitter_role_id: int) -> None:
        """Bookmark a listing for a sitter. Already saved pairs are left alone."""
        cursor = await self._db.execute(
            """
            INSERT INTO saved_listings (listingId, sitterRoleId, savedAt)
            SELECT ?, ?, ?
            WHERE NOT EXISTS (
                SELECT 1 FROM saved_listings
                WHERE listingId = ? AND sitterRoleId = ?
            )
            """,
            (listing_id, sitter_role_id, now_iso(), listing_id, sitter_role_id),
        )
        await self._db.commit()
        if cursor.rowcount:
            activity_logger.info(
                "listing_saved",
                extra={"listing_id": listing_id, "sitter_role_id": sitter_role_id},
            )
        else:
            logger.debug("Listing %d already saved by %d", listing_id, sitter_role_id)

    async def unsave_listing(self, listing_id: int, sitter_role_id: int) -> None:
        """Remove a sitter's bookmark, if any."""
        cursor = await self._db.execute(
            "DELETE FROM saved_listings WHERE listingId = ? AND sitterRoleId = ?",
            (listing_id, sitter_role_id),
        )
        await self._db.commit()
        if cursor.rowcount:
            activity_logger.info(
                "listing_unsaved",
                extra={"listing_id": listing_id, "sitter_role_id": sitter_role_id},
            )

    async def is_listing_saved(self, listing_id: int, sitter_role_id: int) -> bool:
        """Check if a sitter has bookmarked a listing."""
        row = await self._db.fetchone(
            """
            SELECT 1 FROM saved_listings
            WHERE listingId = ? AND sitterRoleId = ?
            LIMIT 1
            """,
            (listing_id, sitter_role_id),
        )
        return row is not None

    async def get_saved_listings(self, sitter_role_id: int) -> list[Listing]:
        """Get the listings a sitter bookmarked, most recently saved first."""
        rows = await self._db.fetchall(
            """
            SELECT l.* FROM listings l
            INNER JOIN saved_listings sl ON l.id = sl.listingId
            WHERE sl.sitterRoleId = ?
            ORDER BY sl.savedAt DESC, sl.id DESC
            """,
            (sitter_role_id,),
        )
        return [_row_to_listing(row) for row in rows]

    async def get_bookmarks_for_sitter(self, sitter_role_id: int) -> list[SavedListing]:
        """Get a sitter's bookmark rows, most recently saved first."""
        rows = await self._db.fetchall(
            """
            SELECT * FROM saved_listings
            WHERE sitterRoleId = ?
            ORDER BY savedAt DESC, id DESC
            """,
            (sitter_role_id,),
        )
        return [_row_to_saved_listing(row) for row in rows]
