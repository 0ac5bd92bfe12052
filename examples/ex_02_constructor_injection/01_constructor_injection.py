"""Constructor injection: the caller supplies the connection.

The caller constructs the connection and passes it to ``Service``. The
service keeps a reference to it and never creates one itself.
"""

from __future__ import annotations

from depinj import RealConnection, Service


def main() -> None:
    connection = RealConnection()
    service = Service(connection)

    print(f"result={service.operation()}")  # => result=10
    print(f"same_connection={service.connection is connection}")  # => same_connection=True


if __name__ == "__main__":
    main()
