"""Authenticated principal."""

from quill.domain.value.common import ValueObject
from quill.domain.value.identifiers import UserId


class Principal(ValueObject):
    """The caller of a request, as established by the auth layer.

    Attributes:
        user_id: Authenticated user
        roles: Role names held by the user
        permissions: Permission names granted through those roles
        super_admin_role: Role that implicitly grants every permission
    """

    user_id: UserId
    roles: frozenset[str] = frozenset()
    permissions: frozenset[str] = frozenset()
    super_admin_role: str = "super-admin"

    @property
    def is_super_admin(self) -> bool:
        return self.super_admin_role in self.roles

    def has_permission(self, permission: str) -> bool:
        """Whether the principal holds ``permission``."""
        if self.is_super_admin:
            return True
        return permission in self.permissions

    def has_any_permission(self, *permissions: str) -> bool:
        """Whether the principal holds at least one of ``permissions``."""
        if self.is_super_admin:
            return True
        return any(p in self.permissions for p in permissions)

    def has_role(self, role: str) -> bool:
        return role in self.roles
