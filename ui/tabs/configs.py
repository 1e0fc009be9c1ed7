# ui/tabs/configs.py
import pandas as pd
import streamlit as st

import utils.state as USTATE
from io_utils.blockfrost import ExternalFetchFailure, fetch_latest_parameters
from logic.context import (
    ContextState, with_block_slot, with_era, with_network, with_parameter, with_parameters,
)
from logic.eras import Era, Network, default_validation_names
from utils.constants import ERAS, NETWORKS
from utils.helpers import format_param_label, normalize_text
from utils.logger import get_logger

logger = get_logger("ui.configs")

EDITOR_NONCE_KEY = "params_editor_nonce"


def _bump_editor():
    # a new key discards edits still held by the previous data_editor instance
    st.session_state[EDITOR_NONCE_KEY] = st.session_state.get(EDITOR_NONCE_KEY, 0) + 1


def render():
    """Render the Configs tab: validation context and UI options."""
    try:
        st.header("⚙️ Configs")
        context_tab, ui_tab = st.tabs(["Context", "UI Options"])
        with context_tab:
            _render_context()
        with ui_tab:
            _render_ui_options()
    except Exception as e:
        st.error(f"Exception in Configs.render(): {e}")
        st.exception(e)


def _render_context():
    ctx = USTATE.get_context()

    col1, col2, col3 = st.columns(3)
    with col1:
        network = st.selectbox("Network", NETWORKS, index=NETWORKS.index(ctx.network.value), key="cfg_network")
    with col2:
        era = st.selectbox("Era", ERAS, index=ERAS.index(ctx.era.value), key="cfg_era")
    with col3:
        slot = st.number_input("Block slot", min_value=0, value=int(ctx.block_slot), step=1, key="cfg_slot")

    if network != ctx.network.value:
        ctx = USTATE.update_context(with_network, network, USTATE.get_latest_params())
        _bump_editor()
    if era != ctx.era.value:
        ctx = USTATE.update_context(with_era, era)
        logger.info("Context era set to %s", era)
    if int(slot) != ctx.block_slot:
        ctx = USTATE.update_context(with_block_slot, slot)

    st.markdown("#### Protocol parameters")
    b1, b2, _ = st.columns([1, 1, 2])
    with b1:
        fetch = st.button("Get latest protocol parameters", key="cfg_fetch", disabled=not ctx.is_translatable)
    with b2:
        reset = st.button("Reset to defaults", key="cfg_reset")

    if fetch:
        _fetch_latest(ctx.network)
        ctx = USTATE.get_context()
    if reset:
        ctx = USTATE.update_context(
            lambda s: ContextState(era=s.era, network=s.network, block_slot=s.block_slot)
        )
        _bump_editor()
        st.success("Parameters reset to defaults.")

    if not ctx.is_translatable:
        st.info(f"{ctx.era.value} parameters are shown for reference; {ctx.era.value} transactions cannot be validated.")

    _render_parameter_editor(ctx)


def _fetch_latest(network: Network) -> None:
    with st.spinner(f"Fetching latest parameters for {network.value}..."):
        try:
            params = fetch_latest_parameters(network)
        except ExternalFetchFailure as e:
            st.warning(f"{e}. Keeping the current values.")
            return
    USTATE.set_latest_params(network.value, params)
    USTATE.update_context(with_parameters, params)
    _bump_editor()
    st.success(f"Loaded {len(params)} parameters for {network.value}.")


def _render_parameter_editor(ctx) -> None:
    shown = ctx.visible_parameters()
    df = pd.DataFrame({
        "Parameter": [p.name for p in shown],
        "Label": [format_param_label(p.name) for p in shown],
        "Value": [normalize_text(p.value) for p in shown],
    })
    edited = st.data_editor(
        df,
        key=f"params_editor_{st.session_state.get(EDITOR_NONCE_KEY, 0)}_{ctx.era.name}",
        hide_index=True,
        use_container_width=True,
        disabled=True if not ctx.is_translatable else ["Parameter", "Label"],
        column_config={
            "Parameter": st.column_config.TextColumn("Parameter"),
            "Label": st.column_config.TextColumn("Label"),
            "Value": st.column_config.TextColumn("Value"),
        },
    )
    if not ctx.is_translatable:
        return

    before = {p.name: normalize_text(p.value) for p in shown}
    rejected = []
    new_ctx = ctx
    for _, row in edited.iterrows():
        name = row["Parameter"]
        value = normalize_text(row["Value"])
        if before.get(name) == value:
            continue
        updated = with_parameter(new_ctx, name, value)
        if updated is new_ctx:
            rejected.append(name)
        new_ctx = updated
    if new_ctx is not ctx:
        USTATE.set_context(new_ctx)
    if rejected:
        st.warning(f"Ignored invalid values for: {', '.join(rejected)} (expected non-negative numbers).")


def _on_option_change(attr: str, key: str):
    setattr(USTATE.get_visibility(), attr, bool(st.session_state[key]))
    USTATE.sync_visibility_to_query_params()


def _on_validation_toggle(name: str, key: str):
    USTATE.get_visibility().set_visible(name, bool(st.session_state[key]))
    USTATE.sync_visibility_to_query_params()


def _render_ui_options():
    vis = USTATE.get_visibility()
    ctx = USTATE.get_context()

    # widget values are seeded from the visibility state, which a decode may have reset
    for attr, key, label in [
        ("always_open", "cfg_always_open", "Validations section always open"),
        ("show_at_beginning", "cfg_beginning", "Show at beginning"),
    ]:
        st.session_state[key] = getattr(vis, attr)
        st.checkbox(label, key=key, on_change=_on_option_change, args=(attr, key))

    if ctx.era is Era.CONWAY:
        st.caption("Conway validations are listed after the first dissection; all of them are shown.")
        return

    st.markdown(f"#### Validations shown ({ctx.era.value})")
    for name in default_validation_names(ctx.era):
        key = f"cfg_val_{ctx.era.name}_{name}"
        st.session_state[key] = vis.is_visible(name)
        st.checkbox(name, key=key, on_change=_on_validation_toggle, args=(name, key))
