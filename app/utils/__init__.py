"""Timezone helpers shared by the persistence and use case layers."""

from .datetime import (
    app_timezone,
    from_storage,
    now_for_storage,
    now_local,
    resolve_timezone,
    to_storage,
)

__all__ = [
    "app_timezone",
    "from_storage",
    "now_for_storage",
    "now_local",
    "resolve_timezone",
    "to_storage",
]
