"""Database schema definitions and seed data."""

from datetime import datetime, timezone

SCHEMA = [
    # Sitting job postings
    """
    CREATE TABLE IF NOT EXISTS listings (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        creatorRoleId INTEGER NOT NULL,
        sitterType TEXT NOT NULL,
        location TEXT NOT NULL,
        startDate TEXT NOT NULL,
        endDate TEXT NOT NULL,
        description TEXT NOT NULL,
        createdAt TEXT NOT NULL
    )
    """,
    # Sitter bookmarks, removed together with their listing
    """
    CREATE TABLE IF NOT EXISTS saved_listings (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        listingId INTEGER NOT NULL,
        sitterRoleId INTEGER NOT NULL,
        savedAt TEXT NOT NULL,
        FOREIGN KEY (listingId) REFERENCES listings(id) ON DELETE CASCADE
    )
    """,
]

# (creatorRoleId, sitterType, location, startDate, endDate, description)
SEED_LISTINGS: list[tuple[int, str, str, str, str, str]] = [
    (
        1,
        "pet",
        "Cape Town, Western Cape",
        "2025-01-10",
        "2025-01-20",
        "Looking for a reliable pet sitter for my two cats while I travel. "
        "They are friendly and low-maintenance.",
    ),
    (
        1,
        "house",
        "Stellenbosch, Western Cape",
        "2025-02-01",
        "2025-02-14",
        "Need someone to house sit our home in Stellenbosch. "
        "Must water plants and collect mail.",
    ),
    (
        1,
        "both",
        "Johannesburg, Gauteng",
        "2025-03-05",
        "2025-03-15",
        "Looking for someone to watch our house and take care of our dog. "
        "Dog needs daily walks.",
    ),
    (
        1,
        "pet",
        "Durban, KwaZulu-Natal",
        "2025-01-25",
        "2025-02-05",
        "Need a pet sitter for my golden retriever. "
        "Very friendly and energetic, loves playing fetch.",
    ),
    (
        1,
        "house",
        "Pretoria, Gauteng",
        "2025-02-20",
        "2025-03-01",
        "House sitting needed for our apartment. "
        "Simple tasks include watering garden and maintaining security.",
    ),
]


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string, e.g. 2026-10-19T08:30:00.123Z."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
