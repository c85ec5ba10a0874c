"""
Main CLI entry point for the Incapsula client.

Provides role and user commands over the user-management API.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from incapsula import __version__

from .._client import Incapsula
from .._exceptions import IncapsulaError
from .._types import CreateRole, CreateUser, UpdateRole
from .display import show_record
from .util import graceful_main


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="incapsula",
        description="Incapsula user-management client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global arguments
    parser.add_argument("--api-id", help="API id (or set INCAPSULA_API_ID environment variable)")
    parser.add_argument(
        "--api-key", help="API key (or set INCAPSULA_API_KEY environment variable)"
    )
    parser.add_argument(
        "--base-url", help="API base URL (or set INCAPSULA_BASE_URL_API environment variable)"
    )
    parser.add_argument("--timeout", type=float, default=60, help="Request timeout in seconds")
    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and responses")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # role
    role = subparsers.add_parser("role", help="Manage roles")
    role_cmds = role.add_subparsers(dest="action", required=True)

    p = role_cmds.add_parser("get", help="Show a role")
    p.add_argument("role_id", type=int)

    p = role_cmds.add_parser("create", help="Add a role to an account")
    p.add_argument("--account-id", type=int, required=True)
    p.add_argument("--name", required=True)
    p.add_argument("--description")
    p.add_argument("--ability", action="append", dest="abilities", help="Repeatable")

    p = role_cmds.add_parser("update", help="Update a role")
    p.add_argument("role_id", type=int)
    p.add_argument("--name", required=True)
    p.add_argument("--description")
    p.add_argument("--ability", action="append", dest="abilities", help="Repeatable")

    p = role_cmds.add_parser("delete", help="Delete a role")
    p.add_argument("role_id", type=int)

    # user
    user = subparsers.add_parser("user", help="Manage users")
    user_cmds = user.add_subparsers(dest="action", required=True)

    p = user_cmds.add_parser("get", help="Show a user")
    p.add_argument("email")
    p.add_argument("--account-id", type=int, required=True)

    p = user_cmds.add_parser("create", help="Add a user to an account")
    p.add_argument("email")
    p.add_argument("--account-id", type=int, required=True)
    p.add_argument("--first-name")
    p.add_argument("--last-name")
    p.add_argument("--role-id", type=int, action="append", dest="role_ids", help="Repeatable")
    p.add_argument("--role-name", action="append", dest="role_names", help="Repeatable")

    p = user_cmds.add_parser("delete", help="Delete a user")
    p.add_argument("email")
    p.add_argument("--account-id", type=int, required=True)

    return parser


def _run_role(client: Incapsula, args: argparse.Namespace, console: Console) -> int:
    if args.action == "get":
        show_record(console, client.roles.get(args.role_id), args.json)
    elif args.action == "create":
        role = CreateRole(
            role_name=args.name,
            account_id=args.account_id,
            role_description=args.description,
            role_abilities=args.abilities,
        )
        show_record(console, client.roles.create(role), args.json)
    elif args.action == "update":
        update = UpdateRole(
            role_name=args.name,
            role_description=args.description,
            role_abilities=args.abilities,
        )
        show_record(console, client.roles.update(args.role_id, update), args.json)
    else:
        client.roles.delete(args.role_id)
        console.print(f"✓ Deleted Role {args.role_id}")
    return 0


def _run_user(client: Incapsula, args: argparse.Namespace, console: Console) -> int:
    if args.action == "get":
        show_record(console, client.users.get(args.email, args.account_id), args.json)
    elif args.action == "create":
        user = CreateUser(
            account_id=args.account_id,
            user_email=args.email,
            first_name=args.first_name,
            last_name=args.last_name,
            role_ids=args.role_ids,
            role_names=args.role_names,
        )
        show_record(console, client.users.create(user), args.json)
    else:
        client.users.delete(args.email, args.account_id)
        console.print(
            f"✓ Deleted User {args.email} (account id: {args.account_id})",
            markup=False,
            soft_wrap=True,
        )
    return 0


def _real_main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # urllib3 logs full URLs, api_key included
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    console = Console()
    errors = Console(stderr=True)
    try:
        client = Incapsula(
            api_id=args.api_id, api_key=args.api_key, base_url=args.base_url, timeout=args.timeout
        )
        if args.command == "role":
            return _run_role(client, args, console)
        return _run_user(client, args, console)
    except IncapsulaError as e:
        errors.print(
            f"❌ {e.message}", style="red", markup=False, highlight=False, soft_wrap=True
        )
        return 1


def main() -> None:
    """Main CLI entry point with graceful interrupt handling."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
