"""Resource namespaces for the user-management API."""

from .roles import Roles
from .users import Users

__all__ = [
    "Roles",
    "Users",
]
