"""Web API layer."""

from miqat.api.app import create_app
from miqat.api.dependencies import get_app_state

__all__ = ["create_app", "get_app_state"]
