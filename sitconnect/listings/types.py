"""Listing and bookmark records."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

ALL_TYPES: Literal["all"] = "all"


class SitterType(Enum):
    """Kind of sitting a listing asks for."""

    PET = "pet"
    HOUSE = "house"
    BOTH = "both"

    @property
    def label(self) -> str:
        """Human readable label."""
        return _SITTER_TYPE_LABELS[self]

    def matches(self, requested: "SitterType") -> bool:
        """Check if a listing of this type satisfies a filter for `requested`."""
        return self is requested or self is SitterType.BOTH


_SITTER_TYPE_LABELS: dict[SitterType, str] = {
    SitterType.PET: "Pet Sitting",
    SitterType.HOUSE: "House Sitting",
    SitterType.BOTH: "Pet & House",
}


class UserRole(Enum):
    """Role a user plays in the app."""

    REQUESTER = "requester"
    SITTER = "sitter"


@dataclass
class Listing:
    """A sitting-job posting."""

    id: int
    creator_role_id: int
    sitter_type: SitterType
    location: str
    start_date: str  # YYYY-MM-DD
    end_date: str  # YYYY-MM-DD, not checked against start_date
    description: str
    created_at: str


@dataclass
class SavedListing:
    """A sitter's bookmark on a listing."""

    id: int
    listing_id: int
    sitter_role_id: int
    saved_at: str
