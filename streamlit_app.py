"""
Lace Inspector - Streamlit application
Dissects Cardano transactions, addresses and blocks and shows ledger validations.
"""

import streamlit as st

from utils import APP_TITLE, APP_VERSION, TAB_ICONS, get_logger, get_setting, parse_bool
from utils.state import clear_results, get_context, get_visibility, init_state
from ui.tabs import address, block, configs, tx
from ui.utils.debug import dump_state, render_guard
from ui.utils.rerun import safe_rerun

logger = get_logger("app")

TAB_REGISTRY = [
    (f"{TAB_ICONS['tx']} Tx", tx.render),
    (f"{TAB_ICONS['address']} Address", address.render),
    (f"{TAB_ICONS['block']} Block", block.render),
    (f"{TAB_ICONS['configs']} Configs", configs.render),
]


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=f"{APP_TITLE} {APP_VERSION}",
        page_icon="🔬",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    init_state()
    _render_sidebar()
    _render_header()
    _render_all_tabs()


def _render_header():
    st.title(f"🔬 {APP_TITLE}")
    ctx = get_context()
    vis = get_visibility()
    st.caption(
        f"{APP_VERSION} • {ctx.network.value} • {ctx.era.value} • "
        f"{len(vis.visible_names)} validation(s) shown"
    )


def _render_sidebar():
    with st.sidebar:
        st.markdown(f"**{APP_TITLE}** {APP_VERSION}")
        if st.button("🧹 Clear results", key="sidebar_clear"):
            clear_results()
            safe_rerun()
        if st.button("♻️ Reset session state", key="sidebar_reset"):
            logger.info("Session state reset from sidebar")
            st.session_state.clear()
            safe_rerun()
    if parse_bool(get_setting("debug", False), default=False):
        dump_state("Session")


def _render_all_tabs():
    """Render all tabs; render_guard keeps one failing tab from blanking the rest."""
    tabs = st.tabs([name for name, _ in TAB_REGISTRY])
    for i, (tab_name, fn) in enumerate(TAB_REGISTRY):
        with tabs[i]:
            clean_tab_name = tab_name.split(" ", 1)[1] if " " in tab_name else tab_name
            render_guard(clean_tab_name, fn)


if __name__ == "__main__":
    main()
