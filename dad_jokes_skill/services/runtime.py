"""Process-wide registry for the active service container.

Both entry surfaces (the FastAPI app and the Lambda handler) register the
container they built at startup here; the container is never mutated after
registration. Tests swap in containers backed by fake feeds.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Callable, Optional

from . import ServiceContainer

_STATE = SimpleNamespace(services=None)


def set_services(container: ServiceContainer) -> None:
    """Register ``container`` as the active service container."""
    _STATE.services = container


def get_services() -> ServiceContainer:
    """Return the registered container or raise if startup has not run."""
    container: Optional[ServiceContainer] = _STATE.services
    if container is None:
        raise RuntimeError("Service container has not been configured.")
    return container


def get_or_create_services(factory: Callable[[], ServiceContainer]) -> ServiceContainer:
    """Return the registered container, building and registering one on first use."""
    if _STATE.services is None:
        set_services(factory())
    return get_services()


def clear_services() -> None:
    """Forget the registered container (tests and cold-start simulations)."""
    _STATE.services = None


__all__ = ["set_services", "get_services", "get_or_create_services", "clear_services"]
