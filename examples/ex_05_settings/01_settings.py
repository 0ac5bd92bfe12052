"""Choosing the connection in the composition root.

``DemoSettings`` names the connection kind; ``build_service`` turns it into
a wired ``Service``. Switching from the real connection to the mock is a
settings change, with no edit to ``Service``.
"""

from __future__ import annotations

from depinj import ConnectionKind, DemoSettings, build_service


def main() -> None:
    real = build_service(DemoSettings(connection=ConnectionKind.REAL))
    mock = build_service(DemoSettings(connection=ConnectionKind.MOCK))
    in_memory = build_service(DemoSettings(connection=ConnectionKind.IN_MEMORY, answer=21))

    print(f"real={real.operation()}")  # => real=10
    print(f"mock={mock.operation()}")  # => mock=0
    print(f"in_memory={in_memory.operation()}")  # => in_memory=42


if __name__ == "__main__":
    main()
