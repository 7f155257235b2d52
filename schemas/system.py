"""
System API models.
"""

from typing import Any, Dict

from pydantic import BaseModel


class SystemStatus(BaseModel):
    """System status"""

    status: str
    uptime: float
    store: Dict[str, Any]


class DebugSettings(BaseModel):
    """Debug mode state"""

    enabled: bool
    log_level: str
