# ui/utils/guards.py
"""
Guard utilities for tab rendering to prevent blank tabs and provide clear error messages.
"""

from typing import Optional, Tuple

import streamlit as st

from io_utils.engine import EngineUnavailable, ModuleEngine, load_engine

ENGINE_KEY = "engine"


@st.cache_resource(show_spinner=False)
def _cached_engine(module_name: Optional[str]) -> ModuleEngine:
    return load_engine(module_name)


def ensure_engine(tab_name: str, module_name: Optional[str] = None) -> Tuple[bool, Optional[ModuleEngine]]:
    """
    Ensure the decoding engine is available for tab rendering.

    Args:
        tab_name: Name of the tab for error messages
        module_name: Engine import path; defaults to the configured one

    Returns:
        Tuple of (success, engine) where success is True if the engine loaded
    """
    try:
        return True, _cached_engine(module_name)
    except EngineUnavailable as e:
        st.warning(f"{e}. Install the engine binding or set `engine_module` in secrets to use the {tab_name} tab.")
        return False, None
    except Exception as e:
        st.error(f"[{tab_name}] engine guard failed: {e}")
        st.exception(e)
        return False, None
