"""Composition root: the one place that picks concrete connections."""

from __future__ import annotations

import logging

from depinj.connections import Connection, InMemoryConnection, MockConnection, RealConnection
from depinj.exceptions import DepInjInvalidConfigurationError
from depinj.services import Service
from depinj.settings import ConnectionKind, DemoSettings

logger = logging.getLogger(__name__)


def build_connection(kind: ConnectionKind | str, *, answer: int = 0) -> Connection:
    """Construct a fresh connection for ``kind``.

    Args:
        kind: A ``ConnectionKind`` or its string value.
        answer: Value served when ``kind`` is ``ConnectionKind.IN_MEMORY``.

    Raises:
        DepInjInvalidConfigurationError: If ``kind`` names no known implementer.

    """
    try:
        kind = ConnectionKind(kind)
    except ValueError as error:
        choices = ", ".join(member.value for member in ConnectionKind)
        msg = f"Unknown connection kind {kind!r}; expected one of: {choices}."
        raise DepInjInvalidConfigurationError(msg) from error

    if kind is ConnectionKind.REAL:
        return RealConnection()
    if kind is ConnectionKind.MOCK:
        return MockConnection()
    return InMemoryConnection(answer)


def build_service(settings: DemoSettings) -> Service:
    """Build a ``Service`` around the connection named by ``settings``."""
    logger.info("Wiring service with %s connection", settings.connection.value)
    return Service(build_connection(settings.connection, answer=settings.answer))
