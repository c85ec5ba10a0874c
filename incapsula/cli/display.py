"""
CLI display helpers for roles and users.

Records render as a two-column rich table, or as camelCase JSON (the API's
own shape) for scripting.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from .._types import Role, User


def _table(title: str, rows: list[tuple[str, Any]]) -> Table:
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    for name, value in rows:
        table.add_row(name, "" if value is None else str(value))
    return table


def role_table(role: Role) -> Table:
    assignments = ", ".join(f"{a.user_email} ({a.account_id})" for a in role.user_assignment)
    return _table(
        f"Role {role.role_id}",
        [
            ("Name", role.role_name),
            ("Description", role.role_description),
            ("Account", f"{role.account_name} ({role.account_id})"),
            ("Abilities", ", ".join(role.role_abilities)),
            ("Assigned users", assignments),
            ("Editable", "yes" if role.is_editable else "no"),
            ("Updated", role.update_date),
        ],
    )


def user_table(user: User) -> Table:
    roles = ", ".join(f"{r.role_name} ({r.role_id})" for r in user.roles_details)
    return _table(
        f"User {user.user_id}",
        [
            ("Email", user.user_email),
            ("Name", f"{user.first_name} {user.last_name}".strip()),
            ("Account", user.account_id),
            ("Roles", roles),
        ],
    )


def show_record(console: Console, record: Role | User, as_json: bool = False) -> None:
    if as_json:
        console.print_json(json.dumps(record.to_dict()))
    elif isinstance(record, Role):
        console.print(role_table(record))
    else:
        console.print(user_table(record))
