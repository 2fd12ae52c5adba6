"""SitConnect - command line entry point."""

import argparse
import asyncio
import sys
from pathlib import Path

from sitconnect.app import Application
from sitconnect.config import Settings, load_settings
from sitconnect.errors import InitializationError
from sitconnect.listings.types import ALL_TYPES, Listing, UserRole
from sitconnect.monitor.logger import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SitConnect - pet and house sitting listings"
    )

    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="Database path (default: from config)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config)",
    )

    parser.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.SITTER.value,
        help="Role to act as (default: sitter)",
    )

    parser.add_argument(
        "--filter",
        choices=[ALL_TYPES, "pet", "house", "both"],
        default=ALL_TYPES,
        help="Sitter type to browse as a sitter (default: all)",
    )

    return parser.parse_args(argv)


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if args.db:
        settings.database.path = Path(args.db)

    if args.log_level:
        settings.logging.level = args.log_level

    return settings


def format_listing(listing: Listing) -> str:
    return (
        f"#{listing.id:<4} {listing.sitter_type.label:<14} {listing.location} "
        f"({listing.start_date} -> {listing.end_date})"
    )


async def async_main(settings: Settings, args: argparse.Namespace) -> int:
    """Async main entry point."""
    app = Application(settings)

    try:
        await app.start()
    except InitializationError as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        await app.stop()
        return 1

    try:
        app.session.select_role(args.role)
        if app.session.role is UserRole.REQUESTER:
            listings = await app.listings.my_listings()
            print(f"My listings ({len(listings)}):")
        else:
            listings = await app.listings.browse(args.filter)
            saved = await app.listings.saved_listings()
            print(f"Listings for '{args.filter}' ({len(listings)}), saved: {len(saved)}")

        for listing in listings:
            print(f"  {format_listing(listing)}")
        return 0
    finally:
        await app.stop()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    settings = load_settings()
    settings = apply_args_to_settings(args, settings)

    setup_logging(
        settings.logging.log_dir,
        level=settings.logging.level,
        json_format=settings.logging.json_format,
    )

    return asyncio.run(async_main(settings, args))


if __name__ == "__main__":
    sys.exit(main())
