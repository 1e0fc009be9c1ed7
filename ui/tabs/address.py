# ui/tabs/address.py
import streamlit as st

import utils.state as USTATE
from io_utils.engine import decode_address
from ui.components import render_address
from ui.utils.guards import ensure_engine


def render():
    """Render the Address tab (bech32 or base58 input)."""
    try:
        st.header("🏷 Address")
        ok, engine = ensure_engine("Address")

        with st.form("address_form"):
            raw = st.text_input("Address", placeholder="addr1... / stake1... / Ae2...")
            submitted = st.form_submit_button("Dissect", type="primary", disabled=not ok)

        if submitted and ok:
            st.session_state[USTATE.ADDRESS_RESULT_KEY] = decode_address(engine, raw)

        out = st.session_state.get(USTATE.ADDRESS_RESULT_KEY)
        if out is not None:
            st.markdown("---")
            render_address(out)

    except Exception as e:
        st.error(f"Exception in Address.render(): {e}")
        st.exception(e)
