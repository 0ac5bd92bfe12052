"""Direct construction: a service that builds its own connection.

``DirectService`` creates a ``RealConnection`` inside its constructor. It
always talks to the real data source, and a test has no way to hand it a
mock without editing the class.
"""

from __future__ import annotations

from depinj import DirectService


def main() -> None:
    service = DirectService()

    print(f"result={service.operation()}")  # => result=10
    print(f"repeated={[service.operation() for _ in range(3)]}")  # => repeated=[10, 10, 10]


if __name__ == "__main__":
    main()
