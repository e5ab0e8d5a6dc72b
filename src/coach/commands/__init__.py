"""CLI commands for coach."""

from .dashboard import dashboard
from .export import export
from .init import init
from .integrations import connect, sync
from .nutrition import nutrition
from .plan import plan
from .profile import profile
from .serve import serve
from .strength import strength

__all__ = [
    "connect",
    "dashboard",
    "export",
    "init",
    "nutrition",
    "plan",
    "profile",
    "serve",
    "strength",
    "sync",
]
