"""
Utilidades del sistema.
"""
from .datetime_utils import (
    get_local_now,
    get_local_timezone,
    local_now_naive,
    to_naive_local,
    day_bounds,
)

__all__ = ["get_local_now", "get_local_timezone", "local_now_naive", "to_naive_local", "day_bounds"]
