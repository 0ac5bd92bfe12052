"""Swapping implementations behind the ``Connection`` protocol.

The same ``Service`` class produces different results depending only on
which connection it was given. Any object with a ``query() -> int`` method
works, including one defined right here.
"""

from __future__ import annotations

from depinj import InMemoryConnection, MockConnection, RealConnection, Service


class FortyTwoConnection:
    def query(self) -> int:
        return 42


def main() -> None:
    print(f"real={Service(RealConnection()).operation()}")  # => real=10
    print(f"mock={Service(MockConnection()).operation()}")  # => mock=0
    print(f"in_memory={Service(InMemoryConnection(7)).operation()}")  # => in_memory=14
    print(f"custom={Service(FortyTwoConnection()).operation()}")  # => custom=84


if __name__ == "__main__":
    main()
