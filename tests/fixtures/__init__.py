"""Test fixtures for SitConnect."""

from tests.fixtures.listings import (
    create_listings,
    listing_fields,
)

__all__ = [
    "create_listings",
    "listing_fields",
]
