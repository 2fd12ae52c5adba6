"""Application error types.

Store failures are not wrapped here: repository calls let aiosqlite errors
propagate unchanged so callers can show them and retry.
"""


class SitConnectError(Exception):
    """Base class for all SitConnect errors."""

    pass


class InitializationError(SitConnectError):
    """The store could not be prepared at start-up."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class RoleNotSelectedError(SitConnectError):
    """An operation needs a role but none has been chosen yet."""

    pass


class WrongRoleError(SitConnectError):
    """The active role is not allowed to perform the operation."""

    def __init__(self, message: str, required: str, active: str) -> None:
        super().__init__(message)
        self.required = required
        self.active = active


class ListingValidationError(SitConnectError):
    """Listing form input is incomplete."""

    def __init__(self, message: str, fields: list[str]) -> None:
        super().__init__(message)
        self.fields = fields


class NotListingOwnerError(SitConnectError):
    """A requester tried to change a listing posted by someone else."""

    def __init__(self, message: str, listing_id: int) -> None:
        super().__init__(message)
        self.listing_id = listing_id
