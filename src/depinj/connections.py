"""Connection capability and its interchangeable implementers."""

from __future__ import annotations

import logging
from typing import Protocol

from typing_extensions import override

logger = logging.getLogger(__name__)

REAL_ANSWER = 5
"""Value served by ``RealConnection``."""

MOCK_ANSWER = 0
"""Value served by ``MockConnection``."""


class Connection(Protocol):
    """Describe the one operation a service needs from its data source.

    Any object with a matching ``query`` method satisfies this protocol;
    implementers do not have to inherit from it.
    """

    def query(self) -> int:
        """Run the query and return its integer result."""
        ...


class RealConnection(Connection):
    """Production connection.

    Stands in for a round trip to a real database and always answers
    ``REAL_ANSWER``.
    """

    @override
    def query(self) -> int:
        logger.debug("Querying real connection")
        return REAL_ANSWER


class MockConnection(Connection):
    """Test double that answers ``MOCK_ANSWER`` without touching anything."""

    @override
    def query(self) -> int:
        return MOCK_ANSWER


class InMemoryConnection(Connection):
    """Connection backed by a single value held in memory."""

    def __init__(self, answer: int) -> None:
        self.answer = answer

    @override
    def query(self) -> int:
        return self.answer

    def __repr__(self) -> str:
        return f"InMemoryConnection(answer={self.answer!r})"
