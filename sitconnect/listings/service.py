"""Role-aware listing operations used by the screens."""

import logging
from typing import TYPE_CHECKING

from sitconnect.errors import ListingValidationError, NotListingOwnerError
from sitconnect.listings.types import ALL_TYPES, Listing, SitterType, UserRole

if TYPE_CHECKING:
    from sitconnect.persistence.repository import Repository
    from sitconnect.session import RoleSession

logger = logging.getLogger(__name__)


def validate_listing_input(
    location: str,
    start_date: str,
    end_date: str,
    description: str,
) -> None:
    """Reject blank form fields. Dates are not parsed or ordered."""
    values = {
        "location": location,
        "start_date": start_date,
        "end_date": end_date,
        "description": description,
    }
    missing = [name for name, value in values.items() if not value or not value.strip()]
    if missing:
        raise ListingValidationError(
            f"Missing required fields: {', '.join(missing)}", fields=missing
        )


class ListingService:
    """Listing workflows for requesters and sitters."""

    def __init__(self, repo: "Repository", session: "RoleSession") -> None:
        self._repo = repo
        self._session = session

    # --- Requester ---

    async def post_listing(
        self,
        sitter_type: SitterType | str,
        location: str,
        start_date: str,
        end_date: str,
        description: str,
    ) -> int:
        """Create a listing owned by the current requester."""
        creator_role_id = self._session.require_role(UserRole.REQUESTER)
        validate_listing_input(location, start_date, end_date, description)
        return await self._repo.create_listing(
            creator_role_id,
            sitter_type,
            location.strip(),
            start_date.strip(),
            end_date.strip(),
            description.strip(),
        )

    async def my_listings(self) -> list[Listing]:
        creator_role_id = self._session.require_role(UserRole.REQUESTER)
        return await self._repo.get_listings_by_creator(creator_role_id)

    async def edit_listing(
        self,
        listing_id: int,
        sitter_type: SitterType | str,
        location: str,
        start_date: str,
        end_date: str,
        description: str,
    ) -> None:
        await self._require_owner(listing_id)
        validate_listing_input(location, start_date, end_date, description)
        await self._repo.update_listing(
            listing_id,
            sitter_type,
            location.strip(),
            start_date.strip(),
            end_date.strip(),
            description.strip(),
        )

    async def remove_listing(self, listing_id: int) -> None:
        await self._require_owner(listing_id)
        await self._repo.delete_listing(listing_id)

    async def _require_owner(self, listing_id: int) -> None:
        """Only the creator may change a listing. Missing listings pass through."""
        creator_role_id = self._session.require_role(UserRole.REQUESTER)
        listing = await self._repo.get_listing(listing_id)
        if listing is not None and listing.creator_role_id != creator_role_id:
            raise NotListingOwnerError(
                f"Listing {listing_id} belongs to another requester",
                listing_id=listing_id,
            )

    # --- Sitter ---

    async def browse(
        self, sitter_type: SitterType | str = ALL_TYPES
    ) -> list[Listing]:
        self._session.require_role(UserRole.SITTER)
        return await self._repo.filter_listings_by_type(sitter_type)

    async def toggle_saved(self, listing_id: int) -> bool:
        """Flip the bookmark on a listing and return whether it is now saved."""
        sitter_role_id = self._session.require_role(UserRole.SITTER)
        if await self._repo.is_listing_saved(listing_id, sitter_role_id):
            await self._repo.unsave_listing(listing_id, sitter_role_id)
            return False
        await self._repo.save_listing(listing_id, sitter_role_id)
        return True

    async def saved_listings(self) -> list[Listing]:
        sitter_role_id = self._session.require_role(UserRole.SITTER)
        return await self._repo.get_saved_listings(sitter_role_id)

    # --- Shared ---

    async def listing_details(self, listing_id: int) -> Listing | None:
        listing = await self._repo.get_listing(listing_id)
        if listing is None:
            logger.debug("Listing %d not found", listing_id)
        return listing
