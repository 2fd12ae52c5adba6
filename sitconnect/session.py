"""Role selection and the current-user stand-in."""

import logging

from sitconnect.config import IdentityConfig
from sitconnect.errors import RoleNotSelectedError, WrongRoleError
from sitconnect.listings.types import UserRole

logger = logging.getLogger(__name__)


class RoleSession:
    """Tracks which role the user picked and the id acting for it.

    There is no sign-in: unless the caller passes one, the id comes from
    the configured identity for the chosen role.
    """

    def __init__(self, identity: IdentityConfig) -> None:
        self._identity = identity
        self._role: UserRole | None = None
        self._role_id: int | None = None

    @property
    def role(self) -> UserRole | None:
        return self._role

    @property
    def role_id(self) -> int:
        """Id of the active role."""
        if self._role_id is None:
            raise RoleNotSelectedError("No role selected")
        return self._role_id

    def select_role(self, role: UserRole | str, role_id: int | None = None) -> int:
        """Switch to a role and return the id acting for it."""
        role = UserRole(role)
        if role_id is None:
            role_id = (
                self._identity.requester_role_id
                if role is UserRole.REQUESTER
                else self._identity.sitter_role_id
            )
        self._role = role
        self._role_id = role_id
        logger.info("Role selected: %s (id=%d)", role.value, role_id)
        return role_id

    def require_role(self, role: UserRole) -> int:
        """Return the active id, checking that `role` is the active role."""
        if self._role is None:
            raise RoleNotSelectedError(f"Select the {role.value} role first")
        if self._role is not role:
            raise WrongRoleError(
                f"Only a {role.value} can do this",
                required=role.value,
                active=self._role.value,
            )
        return self.role_id

    def clear(self) -> None:
        """Return to role selection."""
        self._role = None
        self._role_id = None
