from __future__ import annotations

def register_all() -> None:
    from . import integer_key, string_key  # noqa: F401
