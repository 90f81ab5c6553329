"""
Command Line Interface

Thin manual-testing front end for a running backend. The session token is
kept in the file token store so consecutive invocations stay signed in.

Run from project root:
    python -m restaurant_client login --email manager@restaurant.com --password secret
    python -m restaurant_client call table get_all
    python -m restaurant_client call table change_status 7 occupied
    python -m restaurant_client call reservation get_all --param date=2024-01-15
    python -m restaurant_client call menu create_item --json '{"name": "Tiramisu", "price": 7.99}'
    python -m restaurant_client logout

Author: Khalil Bannouri
Version: 1.0.0
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional, Sequence

from restaurant_client.client import ApiClient
from restaurant_client.core.config import get_logger, get_settings, setup_logging
from restaurant_client.core.errors import ApiError, TokenStoreError
from restaurant_client.resources import DATA, RESOURCES
from restaurant_client.schemas import LoginRequest, TokenPayload
from restaurant_client.tokens import FileTokenStore

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restaurant_client",
        description="Call the restaurant backend API from the command line",
    )
    parser.add_argument("--base-url", help="API base URL (default: from API_URL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Sign in and store the session token")
    login.add_argument("--email", required=True)
    login.add_argument("--password", required=True)

    commands.add_parser("logout", help="Drop the session token and sign out")

    avatar = commands.add_parser("avatar", help="Upload a new avatar image")
    avatar.add_argument("path", help="Image file to upload")

    call = commands.add_parser("call", help="Invoke any catalog endpoint")
    call.add_argument("resource", choices=sorted(RESOURCES))
    call.add_argument("operation")
    call.add_argument("args", nargs="*", help="Path placeholders and body fields, in order")
    call.add_argument("--json", dest="body", help="JSON request body")
    call.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )

    commands.add_parser("endpoints", help="List every catalog endpoint")

    return parser


def parse_param(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise ValueError(f"Invalid --param {raw!r}, expected KEY=VALUE")
    return key, value


def format_endpoints() -> str:
    lines = []
    for resource_name, resource_cls in sorted(RESOURCES.items()):
        for operation, endpoint in resource_cls.endpoints().items():
            lines.append(
                f"{resource_name:<13} {operation:<26} {endpoint.method:<7} {endpoint.path}"
            )
    return "\n".join(lines)


def print_json(payload: Any) -> None:
    if payload is None:
        return
    print(json.dumps(payload, indent=2, default=str))


async def call_endpoint(client: ApiClient, args: argparse.Namespace) -> Any:
    """Resolve ``resource operation`` against the catalog and invoke it."""
    endpoints = RESOURCES[args.resource].endpoints()
    endpoint = endpoints.get(args.operation)
    if endpoint is None:
        raise ValueError(
            f"Unknown operation {args.resource}.{args.operation}. "
            f"Choose from: {', '.join(endpoints)}"
        )

    positional: list[Any] = list(args.args)
    if endpoint.body == DATA:
        positional.append(json.loads(args.body) if args.body else None)
    elif args.body:
        raise ValueError(f"{args.resource}.{args.operation} does not take a JSON body")

    kwargs = {}
    if args.param:
        if not endpoint.query:
            raise ValueError(f"{args.resource}.{args.operation} does not take query parameters")
        kwargs["params"] = [parse_param(raw) for raw in args.param]

    operation = getattr(getattr(client, args.resource), args.operation)
    return await operation(*positional, **kwargs)


async def run(args: argparse.Namespace, client: ApiClient) -> int:
    """
    Execute one parsed command.

    Returns:
        int: Process exit code
    """
    try:
        if args.command == "login":
            credentials = LoginRequest(email=args.email, password=args.password)
            payload = await client.auth.login(credentials)
            token = TokenPayload.model_validate(payload or {}).credential
            if not token:
                print("Login succeeded but the response carried no token", file=sys.stderr)
                return 1
            client.set_auth_token(token)
            print(f"Signed in as {args.email}")

        elif args.command == "logout":
            await client.auth.logout()
            print("Signed out")

        elif args.command == "avatar":
            with open(args.path, "rb") as image:
                print_json(await client.user.upload_avatar(image))

        elif args.command == "call":
            print_json(await call_endpoint(client, args))

        elif args.command == "endpoints":
            print(format_endpoints())

    except ApiError as e:
        print(f"Error ({e.status}): {e.message}", file=sys.stderr)
        print_json(e.data)
        return 1

    except (TypeError, ValueError, OSError, TokenStoreError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


async def _main(args: argparse.Namespace) -> int:
    settings = get_settings()
    token_store = FileTokenStore(
        settings.token_file,
        key=settings.token_key,
        lock_timeout=settings.token_lock_timeout,
    )
    async with ApiClient(base_url=args.base_url, token_store=token_store) as client:
        logger.debug(f"Using {client.base_url}")
        return await run(args, client)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
