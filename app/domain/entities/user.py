"""Domain entity representing the authenticated principal."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Identity asserted by a verified access token."""

    id: str
    email: str | None
    role: str | None
    admin_role: str = "admin"

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role matches ``alias``."""

        return (self.role or "").lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user may author rules and change statuses."""

        return self.has_role(self.admin_role)
