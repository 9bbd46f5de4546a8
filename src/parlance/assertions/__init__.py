"""
Built-in assertions

The definitions the default engine is built from. Sync and async definitions
are registered in separate sets, so the same phrase can mean different
things to ``expect`` and ``expect_async``.
"""

from .awaitable import ASYNC_ASSERTIONS
from .sync_basic import SYNC_BASIC_ASSERTIONS
from .sync_collection import SYNC_COLLECTION_ASSERTIONS
from .sync_date import SYNC_DATE_ASSERTIONS
from .sync_parametric import SYNC_PARAMETRIC_ASSERTIONS

SYNC_ASSERTIONS = (
    SYNC_BASIC_ASSERTIONS
    + SYNC_PARAMETRIC_ASSERTIONS
    + SYNC_COLLECTION_ASSERTIONS
    + SYNC_DATE_ASSERTIONS
)

BUILTIN_ASSERTIONS = SYNC_ASSERTIONS + ASYNC_ASSERTIONS

__all__ = [
    "ASYNC_ASSERTIONS",
    "BUILTIN_ASSERTIONS",
    "SYNC_ASSERTIONS",
    "SYNC_BASIC_ASSERTIONS",
    "SYNC_COLLECTION_ASSERTIONS",
    "SYNC_DATE_ASSERTIONS",
    "SYNC_PARAMETRIC_ASSERTIONS",
]
