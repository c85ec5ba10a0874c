"""Roles resource — add, read, update, and delete account roles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._pipeline import ENDPOINTS, Operation, execute
from .._types import CreateRole, Envelope, Role, UpdateRole

if TYPE_CHECKING:
    from .._http import HTTPClient

ADD_ROLE = Operation(
    name="add_role",
    method="POST",
    path=ENDPOINTS["role"],
    subject="Role",
    action="adding Role",
    parse_error="Error parsing Role JSON response",
    decode=Role.from_dict,
)

GET_ROLE = Operation(
    name="get_role",
    method="GET",
    path=ENDPOINTS["role"] + "/{role_id}",
    subject="Role",
    action="reading Role {role_id}",
    parse_error="Error parsing Role {role_id} JSON response",
    decode=Role.from_dict,
)

UPDATE_ROLE = Operation(
    name="update_role",
    method="PUT",
    path=ENDPOINTS["role"] + "/{role_id}",
    subject="Role",
    action="updating Role {role_id}",
    parse_error="Error parsing Role {role_id} JSON response",
    decode=Role.from_dict,
)

DELETE_ROLE = Operation(
    name="delete_role",
    method="DELETE",
    path=ENDPOINTS["role"] + "/{role_id}",
    subject="Role",
    action="deleting Role {role_id}",
    parse_error="Error parsing Delete Role {role_id} JSON response",
    decode=Envelope.from_dict,
    failure_error="Error deleting Role {role_id} JSON response",
)


class Roles:
    """client.roles — role CRUD."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def create(self, role: CreateRole) -> Role:
        return execute(self._http, ADD_ROLE, body=role)

    def get(self, role_id: int) -> Role:
        return execute(self._http, GET_ROLE, role_id=role_id)

    def update(self, role_id: int, role: UpdateRole) -> Role:
        """Replace name, description, and abilities. Returns the post-update role."""
        return execute(self._http, UPDATE_ROLE, body=role, role_id=role_id)

    def delete(self, role_id: int) -> None:
        execute(self._http, DELETE_ROLE, role_id=role_id)
