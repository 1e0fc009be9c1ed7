# ui/tabs/tx.py
import streamlit as st

import utils.state as USTATE
from io_utils.engine import TxOutcome, accept_tx_outcome, decode_tx_from_form
from logic.context import context_from_state
from logic.topics import TX_TOPICS
from logic.tree import render
from ui.components import render_panel, render_validations
from ui.utils.guards import ensure_engine
from utils.constants import EXAMPLE_TX_CBOR
from utils.logger import get_logger

logger = get_logger("ui.tx")


def _load_example():
    st.session_state[USTATE.TX_RAW_KEY] = EXAMPLE_TX_CBOR


def _submit(engine, raw: str) -> None:
    tracker = USTATE.get_tracker(USTATE.SUBMISSIONS_KEY)
    visibility = USTATE.get_visibility()
    ctx = USTATE.get_context()

    ticket = tracker.begin()
    outcome = decode_tx_from_form(engine, raw, lambda: context_from_state(ctx))
    if accept_tx_outcome(tracker, ticket, outcome, visibility):
        USTATE.sync_visibility_to_query_params()


def _render_outcome(outcome: TxOutcome) -> None:
    if outcome.error:
        st.error(outcome.error)
        return

    visibility = USTATE.get_visibility()
    shown = visibility.filter_for_display(outcome.report.validations)
    panel = render(outcome.section, TX_TOPICS)

    def _validations():
        render_validations(shown, outcome.report.era, visibility.always_open)

    if visibility.show_at_beginning:
        _validations()
    render_panel(panel, key_prefix="tx")
    if not visibility.show_at_beginning:
        _validations()


def render():
    """Render the Tx tab: paste CBOR, dissect, browse the tree and validations."""
    try:
        st.header("🧾 Transaction")
        st.caption("Paste a hex-encoded CBOR transaction. Validation uses the context from ⚙️ Configs.")

        ok, engine = ensure_engine("Tx")

        ctx = USTATE.get_context()
        st.caption(f"Context: {ctx.network.value} · {ctx.era.value} · slot {ctx.block_slot}")

        with st.form("tx_form", clear_on_submit=False):
            raw = st.text_area("Tx CBOR (hex)", key=USTATE.TX_RAW_KEY, height=140)
            submitted = st.form_submit_button("Dissect", type="primary", disabled=not ok)
        st.button("Use example tx", key="tx_example", on_click=_load_example)

        if submitted and ok:
            with st.spinner("Dissecting..."):
                _submit(engine, raw)

        outcome = USTATE.get_tracker(USTATE.SUBMISSIONS_KEY).result
        if outcome is not None:
            st.markdown("---")
            _render_outcome(outcome)

    except Exception as e:
        st.error(f"Exception in Tx.render(): {e}")
        st.exception(e)
