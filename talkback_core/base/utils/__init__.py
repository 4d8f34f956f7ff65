"""Host lookup helpers built on collaborator interfaces."""

from .activity import get_current_activity_name
from .packages import get_version_code, get_version_name

__all__ = ["get_current_activity_name", "get_version_code", "get_version_name"]
