"""Two versions of the same service, before and after dependency injection."""

from __future__ import annotations

import logging

from depinj.connections import Connection, RealConnection
from depinj.exceptions import DepInjMissingDependencyError

logger = logging.getLogger(__name__)

_FACTOR = 2


class DirectService:
    """Service that builds its own connection.

    The ``RealConnection`` is created inside ``__init__``, so nothing outside
    this class can redirect ``operation()`` to a mock or to another data
    source without editing this class. Kept as the counterexample to
    ``Service``.
    """

    def __init__(self) -> None:
        self._connection = RealConnection()
        logger.debug("DirectService created its own %s", type(self._connection).__name__)

    def operation(self) -> int:
        return self._connection.query() * _FACTOR


class Service:
    """Service that receives its connection from the caller.

    The caller owns the connection and decides which implementer to pass;
    the service only keeps a reference to it for its own lifetime and never
    replaces it.

    Args:
        connection: Any object satisfying ``Connection``.

    Raises:
        DepInjMissingDependencyError: If ``connection`` is ``None``.

    """

    def __init__(self, connection: Connection) -> None:
        if connection is None:
            raise DepInjMissingDependencyError(owner=type(self).__name__, parameter="connection")
        self._connection = connection
        logger.debug("Service wired with %s", type(connection).__name__)

    @property
    def connection(self) -> Connection:
        """Return the injected connection."""
        return self._connection

    def operation(self) -> int:
        """Query the injected connection and double the result."""
        return self._connection.query() * _FACTOR

    def __repr__(self) -> str:
        return f"{type(self).__name__}(connection={self._connection!r})"
