"""Command line client for station discovery, wallet and sign-in."""

import argparse
import asyncio
import json
import sys
from typing import Any

import aiohttp
from pydantic import ValidationError

from vibrovolt.adapters.config import AppConfig
from vibrovolt.adapters.rpc_client import RpcHttpClient, RpcPaymentGateway, RpcStationRepository
from vibrovolt.adapters.rpc_schemas import StationOut
from vibrovolt.adapters.storage import JsonFileUserStore
from vibrovolt.application.context import AppContext
from vibrovolt.bootstrap import build_context, configure_logging
from vibrovolt.domain.errors import VibrovoltError
from vibrovolt.domain.models import FilterState, Station, StationCategory, parse_vehicle

DEFAULT_PAYMENT_METHOD = "UPI"


def format_station(station: Station) -> str:
    """One-line summary of a station for terminal output."""
    flags = " [on-demand]" if station.on_demand else ""
    return (
        f"{station.name} ({station.distance}) - {station.type}, "
        f"₹{station.price:g}/kWh, {station.available}/{station.total} free, "
        f"★{station.rating}{flags}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="VibroVolt charging client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fast chargers for cars
  vibrovolt stations --category fast --vehicle Car

  # Search by name against a running backend
  vibrovolt --remote stations --query gachibowli

  # Redeem carbon credits at a partner
  vibrovolt redeem swiggy 150
        """,
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Fetch stations and confirm top-ups through the RPC backend (wallet state stays local)",
    )
    parser.add_argument("--backend-url", help="RPC backend base URL (overrides config)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    stations_parser = subparsers.add_parser("stations", help="List charging stations")
    stations_parser.add_argument("--query", default="", help="Match station name")
    stations_parser.add_argument(
        "--category", default="all", help="all, fast, available or ondemand"
    )
    stations_parser.add_argument("--vehicle", default=None, help="All, 2W, 3W, Car, SUV, Truck or Bus")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    wallet_parser = subparsers.add_parser("wallet", help="Show wallet balance and transactions")
    wallet_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("partners", help="List carbon credit partners")

    redeem_parser = subparsers.add_parser("redeem", help="Redeem carbon credits at a partner")
    redeem_parser.add_argument("partner_id", help="Partner id, e.g. swiggy")
    redeem_parser.add_argument("credits", type=int, help="Credits to redeem")

    funds_parser = subparsers.add_parser("add-funds", help="Top up the wallet")
    funds_parser.add_argument("amount", type=int, help="Amount in rupees")
    funds_parser.add_argument(
        "--method", default=DEFAULT_PAYMENT_METHOD, help=f"Payment method (default: {DEFAULT_PAYMENT_METHOD})"
    )

    login_parser = subparsers.add_parser("login", help="Sign in")
    login_parser.add_argument("email")
    login_parser.add_argument("password")

    subparsers.add_parser("logout", help="Sign out")
    subparsers.add_parser("whoami", help="Show the signed-in user")

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _stations(args: argparse.Namespace, context: AppContext) -> int:
    filter_state = FilterState(
        query=args.query,
        category=StationCategory.parse(args.category),
        vehicle=parse_vehicle(args.vehicle),
    )
    result = await context.discovery.discover(filter_state)
    if result.fetch_failed:
        print("Could not load stations.", file=sys.stderr)
        return 1

    if args.json:
        _print_json(
            [StationOut.from_domain(s).model_dump(by_alias=True, mode="json") for s in result.stations]
        )
        return 0

    if result.is_empty:
        print("No stations match the current filters.")
        return 0
    print(f"\nFound {len(result.stations)} station(s):\n")
    for station in result.stations:
        print(f"  {format_station(station)}")
        print(f"    {station.address}")
    return 0


def _wallet(args: argparse.Namespace, context: AppContext) -> int:
    snapshot = context.wallet.snapshot()
    if args.json:
        _print_json(snapshot)
        return 0
    print(f"Balance: ₹{snapshot['balance']}")
    print(f"Carbon credits: {snapshot['carbonCredits']}")
    print("\nRecent transactions:")
    for tx in snapshot["transactions"]:
        sign = "+" if tx["type"] == "credit" else "-"
        print(f"  {tx['date']:<14} {sign}{tx['amount']:>6}  {tx['title']}")
    return 0


def _partners(context: AppContext) -> int:
    for partner in context.wallet.partners:
        print(
            f"  {partner.id:<12} {partner.name:<16} {partner.category.value:<8} "
            f"min {partner.min_credits} credits"
        )
    return 0


def _redeem(args: argparse.Namespace, context: AppContext) -> int:
    result = context.wallet.redeem_credits(args.partner_id, args.credits)
    if not result.ok:
        print(f"Redemption failed: {result.message}", file=sys.stderr)
        return 1
    print(f"Redeemed {args.credits} credits. Remaining: {context.wallet.carbon_credits}")
    return 0


async def _add_funds(args: argparse.Namespace, context: AppContext) -> int:
    confirmation = await context.wallet.add_funds(args.amount, args.method)
    # Remote balance lives on the backend.
    balance = confirmation.new_balance if getattr(args, "remote", False) else context.wallet.balance
    print(
        f"Added ₹{confirmation.amount} via {confirmation.payment_method} "
        f"(transaction {confirmation.transaction_id}). Balance: ₹{balance}"
    )
    return 0


def _login(args: argparse.Namespace, context: AppContext) -> int:
    user = context.auth.login(args.email, args.password)
    print(f"Signed in as {user.name} <{user.email}>")
    return 0


def _whoami(context: AppContext) -> int:
    user = context.auth.user
    if user is None:
        print("Not signed in.")
        return 1
    print(f"{user.name} <{user.email}> {user.phone}")
    return 0


async def run_command(args: argparse.Namespace, context: AppContext) -> int:
    """Run a parsed command against ``context`` and return the exit code."""
    if args.command == "stations":
        return await _stations(args, context)
    if args.command == "wallet":
        return _wallet(args, context)
    if args.command == "partners":
        return _partners(context)
    if args.command == "redeem":
        return _redeem(args, context)
    if args.command == "add-funds":
        return await _add_funds(args, context)
    if args.command == "login":
        return _login(args, context)
    if args.command == "logout":
        context.auth.logout()
        print("Signed out.")
        return 0
    if args.command == "whoami":
        return _whoami(context)
    raise ValueError(f"Unknown command: {args.command}")


async def _run_remote(args: argparse.Namespace, config: AppConfig, user_store: JsonFileUserStore) -> int:
    base_url = args.backend_url or config.backend_url
    async with aiohttp.ClientSession() as session:
        client = RpcHttpClient(base_url, session, timeout_seconds=config.rpc_timeout_seconds)
        context = build_context(
            config,
            station_repository=RpcStationRepository(client),
            payment_gateway=RpcPaymentGateway(client),
            user_store=user_store,
        )
        return await run_command(args, context)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level.upper())

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    user_store = JsonFileUserStore(config.user_store_path)

    try:
        if args.remote:
            exit_code = await _run_remote(args, config, user_store)
        else:
            exit_code = await run_command(args, build_context(config, user_store=user_store))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (VibrovoltError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
