# utils/state.py
"""
Session-state helpers for the validation context, the visibility options and
submissions. All tabs go through these instead of touching keys directly.
"""

from typing import Any, Dict

import streamlit as st

from io_utils.engine import SubmissionTracker
from logic.context import ContextState, initial_context_state
from logic.validations import ValidationVisibilityState
from .constants import QP_LIST
from .logger import get_logger

logger = get_logger("state")

CONTEXT_KEY = "context_state"            # ContextState
VISIBILITY_KEY = "visibility"            # ValidationVisibilityState
SUBMISSIONS_KEY = "tx_submissions"       # SubmissionTracker
BLOCK_SUBMISSIONS_KEY = "block_submissions"
ADDRESS_RESULT_KEY = "address_result"    # AddressOutput
LATEST_PARAMS_KEY = "latest_params"      # Dict[network, List[ProtocolParameter]]
TX_RAW_KEY = "tx_raw"
BLOCK_RAW_KEY = "block_raw"


def init_state() -> None:
    """Initialize keys in session state used by the app."""
    if CONTEXT_KEY not in st.session_state:
        st.session_state[CONTEXT_KEY] = initial_context_state()
    if VISIBILITY_KEY not in st.session_state:
        params = _query_params_snapshot()
        # without a persisted list, the first decode shows the full default list
        active_era = get_context().era.value if params.get(QP_LIST) is not None else None
        st.session_state[VISIBILITY_KEY] = ValidationVisibilityState.from_query_params(params, active_era=active_era)
    for key, factory in [
        (SUBMISSIONS_KEY, SubmissionTracker),
        (BLOCK_SUBMISSIONS_KEY, SubmissionTracker),
        (ADDRESS_RESULT_KEY, lambda: None),
        (LATEST_PARAMS_KEY, dict),
        (TX_RAW_KEY, str),
        (BLOCK_RAW_KEY, str),
    ]:
        if key not in st.session_state:
            st.session_state[key] = factory()


def _query_params_snapshot() -> Dict[str, Any]:
    try:
        return {k: st.query_params.get(k) for k in st.query_params.keys()}
    except Exception:
        return {}


def get_context() -> ContextState:
    return st.session_state.get(CONTEXT_KEY) or initial_context_state()


def set_context(state: ContextState) -> None:
    st.session_state[CONTEXT_KEY] = state


def update_context(reducer, *args) -> ContextState:
    """Apply a reducer (state, *args) -> state to the stored context."""
    new_state = reducer(get_context(), *args)
    set_context(new_state)
    return new_state


def get_visibility() -> ValidationVisibilityState:
    vis = st.session_state.get(VISIBILITY_KEY)
    if vis is None:
        vis = ValidationVisibilityState()
        st.session_state[VISIBILITY_KEY] = vis
    return vis


def sync_visibility_to_query_params() -> None:
    """Write the visibility options to the URL so they survive navigation."""
    params = get_visibility().to_query_params()
    try:
        for key, value in params.items():
            if st.query_params.get(key) != value:
                st.query_params[key] = value
    except Exception as e:
        logger.warning("Could not update query params: %s", e)


def get_tracker(key: str = SUBMISSIONS_KEY) -> SubmissionTracker:
    tracker = st.session_state.get(key)
    if tracker is None:
        tracker = SubmissionTracker()
        st.session_state[key] = tracker
    return tracker


def get_latest_params() -> Dict[str, list]:
    """Fetched parameter lists keyed by network name."""
    return dict(st.session_state.get(LATEST_PARAMS_KEY) or {})


def set_latest_params(network: str, params: list) -> None:
    cache = dict(st.session_state.get(LATEST_PARAMS_KEY) or {})
    cache[network] = params
    st.session_state[LATEST_PARAMS_KEY] = cache


def clear_results() -> None:
    """Forget decoded results; context and visibility options stay."""
    for key in [SUBMISSIONS_KEY, BLOCK_SUBMISSIONS_KEY]:
        st.session_state[key] = SubmissionTracker()
    st.session_state[ADDRESS_RESULT_KEY] = None
