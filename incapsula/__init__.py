"""
incapsula - Python client for the Incapsula user-management API.

Typed role and user operations with classified errors.
"""

__version__ = "0.1.0"

from ._client import Incapsula
from ._config import Config
from ._exceptions import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    IncapsulaError,
    SemanticError,
    StatusError,
    TransportError,
)
from ._pipeline import ENDPOINTS, Operation, execute
from ._types import (
    CreateRole,
    CreateUser,
    Envelope,
    EnvelopeOutcome,
    Role,
    UpdateRole,
    User,
    UserAssignment,
    UserRole,
)

__all__ = [
    "ENDPOINTS",
    "Config",
    "ConfigurationError",
    "CreateRole",
    "CreateUser",
    "DecodeError",
    "EncodeError",
    "Envelope",
    "EnvelopeOutcome",
    # Main client
    "Incapsula",
    "IncapsulaError",
    "Operation",
    "Role",
    "SemanticError",
    "StatusError",
    "TransportError",
    "UpdateRole",
    "User",
    "UserAssignment",
    "UserRole",
    "execute",
]
