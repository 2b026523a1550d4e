from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import requests
from dotenv import load_dotenv

from .api.action_api import ActionAPI
from .api.auth_api import AuthAPI
from .models import Action, ActionDetails
from .utils.config_store import DEFAULT_CONFIG_PATH, ConfigError, ConfigStore, load_config
from .utils.http_client import API_BASE, AuthenticationError, HoverAPIError, HttpClient

load_dotenv()


def _add_action_fields(parser: argparse.ArgumentParser, require_name: bool) -> None:
    parser.add_argument("--name", required=require_name, help="Action name")
    parser.add_argument("--root-code", help="USSD root code, e.g. *150#")
    parser.add_argument("--transport-type", help="Transport used to run the action, e.g. ussd")
    parser.add_argument(
        "--operator",
        dest="operators",
        action="append",
        default=None,
        help="World operator id the action applies to (repeatable)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hovercli", description="Welcome to the Hover Command Line Interface.")
    parser.add_argument("--config", default=None, help=f"config file (default is {DEFAULT_CONFIG_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    login = commands.add_parser("login", help="Authenticate and cache a token in the config file")
    login.add_argument("--force", action="store_true", help="Request a new token even if the cached one is valid")

    actions = commands.add_parser("actions", help="Manage custom actions")
    action_commands = actions.add_subparsers(dest="action_command", metavar="ACTION_COMMAND")
    action_commands.required = True

    action_commands.add_parser("list", help="List custom actions")

    show = action_commands.add_parser("show", help="Show a single action")
    show.add_argument("action_id")

    create = action_commands.add_parser("create", help="Create an action")
    _add_action_fields(create, require_name=True)

    update = action_commands.add_parser("update", help="Update an action")
    update.add_argument("action_id")
    _add_action_fields(update, require_name=False)

    delete = action_commands.add_parser("delete", help="Delete an action")
    delete.add_argument("action_id")

    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def build_http_client(config: ConfigStore) -> HttpClient:
    base_url = config.get_string("api_url") or API_BASE
    return HttpClient(base_url=base_url, timeout=config.get_float("timeout"))


def print_actions(actions: List[Action]) -> None:
    if not actions:
        print("No actions found.")
        return
    print(f"{'ID':<10} | {'Name':<30} | Root code")
    print("-" * 60)
    for action in actions:
        attributes = action.attributes
        print(f"{action.id:<10} | {str(attributes.get('name', '')):<30} | {attributes.get('root_code', '')}")


def print_action(action: Action) -> None:
    print(f"id: {action.id}")
    for key, value in sorted(action.attributes.items()):
        print(f"{key}: {value}")


def _details_from_args(args: argparse.Namespace) -> ActionDetails:
    return ActionDetails(
        name=args.name,
        root_code=args.root_code,
        transport_type=args.transport_type,
        world_operators=args.operators,
    )


def run_actions(args: argparse.Namespace, auth_api: AuthAPI) -> None:
    action_api = ActionAPI(auth_api)
    try:
        if args.action_command == "list":
            print_actions(action_api.list_actions())
        elif args.action_command == "show":
            print_action(action_api.get_action(args.action_id))
        elif args.action_command == "create":
            action = action_api.create_action(_details_from_args(args))
            logging.info("Created action %s", action.id)
            print_action(action)
        elif args.action_command == "update":
            action = action_api.update_action(args.action_id, _details_from_args(args))
            logging.info("Updated action %s", action.id)
            print_action(action)
        elif args.action_command == "delete":
            action_api.delete_action(args.action_id)
            logging.info("Deleted action %s", args.action_id)
    except AuthenticationError:
        auth_api.clear_token()
        raise


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(exc)
        return 1

    if not args.command:
        parser.print_help()
        return 0

    try:
        with build_http_client(config) as http_client:
            auth_api = AuthAPI(http_client, config)
            if args.command == "login":
                token = auth_api.authenticate(force=args.force)
                print(f"Logged in; token valid until {token.expiry.isoformat(timespec='seconds')}")
            elif args.command == "actions":
                run_actions(args, auth_api)
    except (HoverAPIError, ConfigError, requests.RequestException) as exc:
        print(exc)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
