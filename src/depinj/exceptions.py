from __future__ import annotations


class DepInjError(Exception):
    """Root of the exceptions raised by depinj.

    Every error here points at a wiring mistake made by the caller, such as
    a missing collaborator or an unknown connection kind, never at a failure
    inside a connection.
    """


class DepInjMissingDependencyError(DepInjError):
    """Signal that a required collaborator was not supplied.

    Raised by ``Service.__init__`` when the connection argument is ``None``.
    The check happens at construction so the mistake surfaces where the
    service is wired, not later inside ``operation()``.

    Typical fix is constructing a ``Connection`` implementer in the
    composition root and passing it in, for example
    ``Service(RealConnection())``.
    """

    def __init__(self, owner: str, parameter: str) -> None:
        self.owner = owner
        self.parameter = parameter
        super().__init__(f"{owner} requires a '{parameter}' dependency, got None.")


class DepInjInvalidConfigurationError(DepInjError):
    """Signal a composition root asked for an unknown implementer.

    Raised by ``build_connection`` when the requested kind has no matching
    ``Connection`` implementer.
    """
