from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from depinj.connections import MockConnection, RealConnection
from depinj.services import DirectService, Service
from depinj.settings import LOG_LEVELS, ConnectionKind, DemoSettings
from depinj.wiring import build_service

_DESCRIPTION = "Compare a service that builds its own connection with one that receives it."


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="depinj", description=_DESCRIPTION)
    parser.add_argument(
        "--connection",
        choices=[kind.value for kind in ConnectionKind],
        help="Connection injected into the configured service (env: DEPINJ_CONNECTION).",
    )
    parser.add_argument(
        "--answer",
        type=int,
        help="Value served by the in-memory connection (env: DEPINJ_ANSWER).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for stderr output (env: DEPINJ_LOG_LEVEL).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # CLI flags win over environment variables.
    overrides: dict[str, Any] = {
        name: value
        for name, value in (
            ("connection", args.connection),
            ("answer", args.answer),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    try:
        settings = DemoSettings(**overrides)
    except ValidationError as error:
        parser.error(f"invalid settings:\n{error}")
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    print(f"direct_real={DirectService().operation()}")
    print(f"injected_real={Service(RealConnection()).operation()}")
    print(f"injected_mock={Service(MockConnection()).operation()}")

    configured = build_service(settings)
    print(f"configured_{settings.connection.value}={configured.operation()}")
    return 0
