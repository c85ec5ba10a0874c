"""Users resource — add, read, and delete account users.

Users are addressed by email plus account id, sent as query parameters
rather than in the path. The API has no update call for users.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._pipeline import ENDPOINTS, Operation, execute
from .._types import CreateUser, Envelope, User

if TYPE_CHECKING:
    from .._http import HTTPClient

_USER_KEY = (("userEmail", "user_email"), ("accountId", "account_id"))

ADD_USER = Operation(
    name="add_user",
    method="POST",
    path=ENDPOINTS["user"],
    subject="User",
    action="adding User {user_email}",
    parse_error="Error parsing User JSON response for email {user_email}",
    decode=User.from_dict,
)

GET_USER = Operation(
    name="get_user",
    method="GET",
    path=ENDPOINTS["user"],
    subject="User",
    action="reading User for Email {user_email} (account id: {account_id})",
    parse_error=(
        "Error parsing User JSON response for Email {user_email} (account id: {account_id})"
    ),
    decode=User.from_dict,
    query=_USER_KEY,
)

DELETE_USER = Operation(
    name="delete_user",
    method="DELETE",
    path=ENDPOINTS["user"],
    subject="User",
    action="deleting User with Email {user_email} (account id: {account_id})",
    parse_error="Error parsing Email {user_email} JSON response for Account ID {account_id}",
    decode=Envelope.from_dict,
    query=_USER_KEY,
    failure_error="Error deleting Email {user_email} JSON response for Account ID {account_id}",
)


class Users:
    """client.users — user create/get/delete."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def create(self, user: CreateUser) -> User:
        return execute(self._http, ADD_USER, body=user, user_email=user.user_email)

    def get(self, user_email: str, account_id: int) -> User:
        return execute(self._http, GET_USER, user_email=user_email, account_id=account_id)

    def delete(self, user_email: str, account_id: int) -> None:
        execute(self._http, DELETE_USER, user_email=user_email, account_id=account_id)
