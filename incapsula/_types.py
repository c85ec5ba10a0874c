"""Dataclass models mirroring user-management API payloads.

Records decode from camelCase JSON; fields missing from a response, or
sent as null, take the zero value of their type. A value of the wrong JSON
type raises TypeError. Mutation requests serialize back to camelCase and
leave out anything set to None.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Any

SUCCESS_CODE = 200


def _object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"expected JSON object, got {type(data).__name__}")
    return data


def _array(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected JSON array for {key!r}, got {type(value).__name__}")
    return value


def _mismatch(key: str, expected: str, value: Any) -> TypeError:
    return TypeError(f"expected {expected} for {key!r}, got {type(value).__name__}")


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass; JSON true is not a number
    if type(value) is not int:
        raise _mismatch(key, "integer", value)
    return value


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _mismatch(key, "string", value)
    return value


def _bool(data: dict, key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch(key, "boolean", value)
    return value


def _str_list(data: dict, key: str) -> tuple[str, ...]:
    items = _array(data, key)
    for item in items:
        if not isinstance(item, str):
            raise _mismatch(f"{key}[]", "string", item)
    return tuple(items)


def _compact(body: dict) -> dict:
    return {k: v for k, v in body.items() if v is not None}


@dataclass(frozen=True)
class UserAssignment:
    """A user the role is assigned to."""

    user_email: str
    account_id: int

    @classmethod
    def from_dict(cls, data: dict) -> UserAssignment:
        data = _object(data)
        return cls(
            user_email=_str(data, "userEmail"),
            account_id=_int(data, "accountId"),
        )

    def to_dict(self) -> dict:
        return {"userEmail": self.user_email, "accountId": self.account_id}


@dataclass(frozen=True)
class Role:
    """A role within an account: a named set of abilities."""

    role_id: int
    role_name: str
    role_description: str
    account_id: int
    account_name: str
    role_abilities: tuple[str, ...]
    user_assignment: tuple[UserAssignment, ...]
    update_date: str
    is_editable: bool

    @classmethod
    def from_dict(cls, data: Any) -> Role:
        data = _object(data)
        return cls(
            role_id=_int(data, "roleId"),
            role_name=_str(data, "roleName"),
            role_description=_str(data, "roleDescription"),
            account_id=_int(data, "accountId"),
            account_name=_str(data, "accountName"),
            role_abilities=_str_list(data, "roleAbilities"),
            user_assignment=tuple(
                UserAssignment.from_dict(u) for u in _array(data, "userAssignment")
            ),
            update_date=_str(data, "updateDate"),
            is_editable=_bool(data, "isEditable"),
        )

    def to_dict(self) -> dict:
        return {
            "roleId": self.role_id,
            "roleName": self.role_name,
            "roleDescription": self.role_description,
            "accountId": self.account_id,
            "accountName": self.account_name,
            "roleAbilities": list(self.role_abilities),
            "userAssignment": [u.to_dict() for u in self.user_assignment],
            "updateDate": self.update_date,
            "isEditable": self.is_editable,
        }


@dataclass(frozen=True)
class CreateRole:
    """Body for adding a role."""

    role_name: str
    account_id: int
    role_description: str | None = None
    role_abilities: list[str] | None = None

    def to_dict(self) -> dict:
        return _compact(
            {
                "roleName": self.role_name,
                "roleDescription": self.role_description,
                "accountId": self.account_id,
                "roleAbilities": self.role_abilities,
            }
        )


@dataclass(frozen=True)
class UpdateRole:
    """Body for updating a role. Roles cannot move between accounts."""

    role_name: str
    role_description: str | None = None
    role_abilities: list[str] | None = None

    def to_dict(self) -> dict:
        return _compact(
            {
                "roleName": self.role_name,
                "roleDescription": self.role_description,
                "roleAbilities": self.role_abilities,
            }
        )


@dataclass(frozen=True)
class UserRole:
    """A role held by a user."""

    role_id: int
    role_name: str

    @classmethod
    def from_dict(cls, data: Any) -> UserRole:
        data = _object(data)
        return cls(role_id=_int(data, "roleId"), role_name=_str(data, "roleName"))

    def to_dict(self) -> dict:
        return {"roleId": self.role_id, "roleName": self.role_name}


@dataclass(frozen=True)
class User:
    """A user account, identified by email within an account."""

    user_id: int
    account_id: int
    first_name: str
    last_name: str
    user_email: str
    roles_details: tuple[UserRole, ...]

    @classmethod
    def from_dict(cls, data: Any) -> User:
        data = _object(data)
        return cls(
            user_id=_int(data, "userId"),
            account_id=_int(data, "accountId"),
            first_name=_str(data, "firstName"),
            last_name=_str(data, "lastName"),
            user_email=_str(data, "userEmail"),
            roles_details=tuple(UserRole.from_dict(r) for r in _array(data, "rolesDetails")),
        )

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "accountId": self.account_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "userEmail": self.user_email,
            "rolesDetails": [r.to_dict() for r in self.roles_details],
        }


@dataclass(frozen=True)
class CreateUser:
    """Body for adding a user to an account."""

    account_id: int
    user_email: str
    first_name: str | None = None
    last_name: str | None = None
    role_ids: list[int] | None = None
    role_names: list[str] | None = None

    def to_dict(self) -> dict:
        return _compact(
            {
                "accountId": self.account_id,
                "userEmail": self.user_email,
                "roleIds": self.role_ids,
                "roleNames": self.role_names,
                "firstName": self.first_name,
                "lastName": self.last_name,
            }
        )


class EnvelopeOutcome(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Envelope:
    """Generic ``{code, message, debug_info}`` result of delete calls.

    The API can report failure inside a 200 response, so ``code`` is the
    real verdict. A body without a code counts as failure; a code that is
    not a JSON integer (``200.0``, ``"200"``) does not decode at all.
    """

    code: int
    message: str
    debug_info: Any

    @classmethod
    def from_dict(cls, data: Any) -> Envelope:
        data = _object(data)
        return cls(
            code=_int(data, "code"),
            message=_str(data, "message"),
            debug_info=data.get("debug_info"),
        )

    @property
    def outcome(self) -> EnvelopeOutcome:
        if self.code == SUCCESS_CODE:
            return EnvelopeOutcome.SUCCESS
        return EnvelopeOutcome.FAILURE
