"""Listing domain types."""

from sitconnect.listings.types import (
    ALL_TYPES,
    Listing,
    SavedListing,
    SitterType,
    UserRole,
)

__all__ = [
    "ALL_TYPES",
    "Listing",
    "SavedListing",
    "SitterType",
    "UserRole",
]
