# ui/utils/rerun.py
import streamlit as st

RERUN_NONCE_KEY = "__force_rerun_nonce"


def safe_rerun():
    """Rerun the script now; releases without a rerun API fall back to a state bump."""
    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if callable(rerun):
        rerun()
        return
    st.session_state[RERUN_NONCE_KEY] = st.session_state.get(RERUN_NONCE_KEY, 0) + 1
