from __future__ import annotations

import argparse
import json

from .auth_controller import AuthState
from .config import load_config
from .exceptions import RequestError, UnauthorizedError
from .logger import configure_logging
from .session import ApiSession
from .ui_errors import to_user_facing_error


def _print(payload: object) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _require_login(session: ApiSession) -> None:
    controller = session.auth_controller()
    if controller.check_auth() is not AuthState.AUTHENTICATED:
        raise UnauthorizedError(code="NOT_AUTHENTICATED", message="Not logged in", status_code=401)


def cmd_login(session: ApiSession, args: argparse.Namespace) -> int:
    result = session.auth_controller().login(args.email, args.password)
    if not result.success:
        _print({"success": False, "message": result.message})
        return 1
    _print({"success": True, "admin": result.admin.model_dump(mode="json") if result.admin else None})
    return 0


def cmd_logout(session: ApiSession, args: argparse.Namespace) -> int:
    session.auth_controller().logout()
    _print({"success": True})
    return 0


def cmd_me(session: ApiSession, args: argparse.Namespace) -> int:
    controller = session.auth_controller()
    state = controller.check_auth()
    _print(
        {
            "state": state.value,
            "admin": controller.admin.model_dump(mode="json") if controller.admin else None,
        }
    )
    return 0 if state is AuthState.AUTHENTICATED else 1


def cmd_stats(session: ApiSession, args: argparse.Namespace) -> int:
    _require_login(session)
    stats = session.admin_client().stats().require_data()
    _print(stats.model_dump(mode="json"))
    return 0


def cmd_supplier_stock(session: ApiSession, args: argparse.Namespace) -> int:
    _require_login(session)
    report = session.stock_client().supplier_stock_balance(args.supplier_id)
    _print(report.balance.model_dump(mode="json"))
    return 0


def cmd_client_stock(session: ApiSession, args: argparse.Namespace) -> int:
    _require_login(session)
    report = session.stock_client().client_stock_balance(args.client_id)
    _print(
        {
            **report.balance.model_dump(mode="json"),
            "batches": [
                {"id": batch.id, **batch.summary().model_dump(mode="json")} for batch in report.batches
            ],
        }
    )
    return 0


def cmd_clients_stock(session: ApiSession, args: argparse.Namespace) -> int:
    _require_login(session)
    reports = session.stock_client().all_clients_stock_balance()
    _print([{"client_id": report.party_id, **report.balance.model_dump(mode="json")} for report in reports])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scanback-admin", description="ScanBack admin console CLI")
    parser.add_argument("--env-file", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    login_parser = subparsers.add_parser("login")
    login_parser.add_argument("--email", required=True)
    login_parser.add_argument("--password", required=True)
    login_parser.set_defaults(func=cmd_login)

    logout_parser = subparsers.add_parser("logout")
    logout_parser.set_defaults(func=cmd_logout)

    me_parser = subparsers.add_parser("me")
    me_parser.set_defaults(func=cmd_me)

    stats_parser = subparsers.add_parser("stats")
    stats_parser.set_defaults(func=cmd_stats)

    supplier_parser = subparsers.add_parser("supplier-stock")
    supplier_parser.add_argument("supplier_id")
    supplier_parser.set_defaults(func=cmd_supplier_stock)

    client_parser = subparsers.add_parser("client-stock")
    client_parser.add_argument("client_id")
    client_parser.set_defaults(func=cmd_client_stock)

    clients_parser = subparsers.add_parser("clients-stock")
    clients_parser.set_defaults(func=cmd_clients_stock)
    return parser


def main(argv: list[str] | None = None, session: ApiSession | None = None) -> None:
    args = build_parser().parse_args(argv)
    if session is None:
        config = load_config(args.env_file)
        configure_logging(config.log_level)
        session = ApiSession(config)
    try:
        code = args.func(session, args)
    except RequestError as exc:
        if isinstance(exc, UnauthorizedError) and session.store is not None:
            session.store.clear()
        error = to_user_facing_error(exc)
        _print({"error": exc.code, "message": error.message, "details": error.technical_details})
        raise SystemExit(1) from exc
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
