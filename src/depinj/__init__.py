from depinj.connections import (
    MOCK_ANSWER,
    REAL_ANSWER,
    Connection,
    InMemoryConnection,
    MockConnection,
    RealConnection,
)
from depinj.exceptions import (
    DepInjError,
    DepInjInvalidConfigurationError,
    DepInjMissingDependencyError,
)
from depinj.services import DirectService, Service
from depinj.settings import ConnectionKind, DemoSettings
from depinj.wiring import build_connection, build_service

__all__ = [
    "MOCK_ANSWER",
    "REAL_ANSWER",
    "Connection",
    "ConnectionKind",
    "DemoSettings",
    "DepInjError",
    "DepInjInvalidConfigurationError",
    "DepInjMissingDependencyError",
    "DirectService",
    "InMemoryConnection",
    "MockConnection",
    "RealConnection",
    "Service",
    "build_connection",
    "build_service",
]
