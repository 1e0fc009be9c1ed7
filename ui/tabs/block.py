# ui/tabs/block.py
import streamlit as st

import utils.state as USTATE
from io_utils.engine import decode_block
from logic.topics import BLOCK_TOPICS
from logic.tree import render as render_tree
from ui.components import render_panel
from ui.utils.guards import ensure_engine


def render():
    """Render the Block tab."""
    try:
        st.header("🧱 Block")
        st.caption("Paste a hex-encoded CBOR block.")

        ok, engine = ensure_engine("Block")

        with st.form("block_form"):
            raw = st.text_area("Block CBOR (hex)", key=USTATE.BLOCK_RAW_KEY, height=140)
            submitted = st.form_submit_button("Dissect", type="primary", disabled=not ok)

        tracker = USTATE.get_tracker(USTATE.BLOCK_SUBMISSIONS_KEY)
        if submitted and ok:
            ticket = tracker.begin()
            with st.spinner("Dissecting..."):
                tracker.accept(ticket, decode_block(engine, raw))

        if tracker.result is not None:
            st.markdown("---")
            render_panel(render_tree(tracker.result, BLOCK_TOPICS), key_prefix="block")

    except Exception as e:
        st.error(f"Exception in Block.render(): {e}")
        st.exception(e)
