# ui/utils/debug.py
from __future__ import annotations

import dataclasses
import json
import traceback

import streamlit as st

from utils.logger import get_logger

logger = get_logger("ui")

_MAX_REPR = 120


def describe(value) -> str:
    """Short, JSON-friendly description of a session value."""
    if value is None or isinstance(value, (bool, int, float)):
        return repr(value)
    if isinstance(value, str):
        text = repr(value)
        return text if len(text) <= _MAX_REPR else f"{text[:_MAX_REPR - 3]}..."
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = ", ".join(f.name for f in dataclasses.fields(value))
        return f"{type(value).__name__}({names})"
    if isinstance(value, (dict, list, tuple, set)):
        return f"{type(value).__name__}(len={len(value)})"
    return f"<{type(value).__name__}>"


def dump_state(where: str, keys: list[str] | None = None, expanded: bool = False):
    """Session-state snapshot in a sidebar expander."""
    wanted = set(keys) if keys else None
    try:
        snapshot = {
            k: describe(v)
            for k, v in sorted(st.session_state.items(), key=lambda kv: str(kv[0]))
            if wanted is None or k in wanted
        }
    except Exception as e:
        logger.warning("State dump failed at %s: %s", where, e)
        st.sidebar.error(f"State dump failed: {type(e).__name__}: {e}")
        return
    with st.sidebar.expander(f"🛠 Session: {where}", expanded=expanded):
        st.code(json.dumps(snapshot, indent=2), language="json")


def render_guard(label: str, fn):
    """Call a tab's render(); an escaping exception is shown in that tab only."""
    try:
        return fn()
    except Exception as e:
        logger.exception("Rendering %s failed", label)
        st.error(f"Exception in {label}.render(): {type(e).__name__}: {e}")
        st.code(traceback.format_exc())
        return None
