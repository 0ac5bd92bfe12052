"""Focused example: ``DepInjMissingDependencyError``.

Passing ``None`` instead of a connection fails when the service is built,
not later when ``operation()`` runs.
"""

from __future__ import annotations

from depinj import DepInjMissingDependencyError, Service


def main() -> None:
    try:
        Service(None)  # type: ignore[arg-type]
    except DepInjMissingDependencyError as error:
        error_name = type(error).__name__
        parameter = error.parameter
    else:
        msg = "Service(None) was expected to raise DepInjMissingDependencyError."
        raise AssertionError(msg)

    print(f"missing={error_name}")  # => missing=DepInjMissingDependencyError
    print(f"parameter={parameter}")  # => parameter=connection


if __name__ == "__main__":
    main()
