"""Store-side current timestamp with millisecond resolution."""
from __future__ import annotations

from sqlalchemy import DateTime
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement


class utcnow(FunctionElement):
    """Current time as computed by the store, usable as a server default."""

    type = DateTime(timezone=True)
    inherit_cache = True


@compiles(utcnow)
def _default_utcnow(element, compiler, **kw) -> str:
    return "CURRENT_TIMESTAMP"


@compiles(utcnow, "sqlite")
def _sqlite_utcnow(element, compiler, **kw) -> str:
    # CURRENT_TIMESTAMP on SQLite only has second resolution
    return "(strftime('%Y-%m-%d %H:%M:%f', 'now'))"
