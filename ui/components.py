# ui/components.py
"""
Streamlit renderers for rendered panel trees, validation results and
address diagnostics. Layout decisions live in logic.tree; this module only
draws what it is handed.
"""

from typing import Iterable, Optional

import streamlit as st

from io_utils.engine import AddressOutput, ShelleyPart
from logic.tree import ATTRIBUTE, EMPTY, ERROR, HEX, ROOT, SECTION, RenderedPanel
from logic.validations import ValidationResult, summarize
from utils.constants import EMPTY_PANEL_TEXT


def _heading(panel: RenderedPanel, level: int) -> None:
    marks = "#" * min(3 + level, 6)
    st.markdown(f"{marks} {panel.title or '(untitled)'}")
    if panel.description:
        st.caption(panel.description)


def _leaf(panel: RenderedPanel) -> None:
    if panel.kind == HEX:
        st.caption(panel.title)
        st.code(panel.text or "", language=None, wrap_lines=True)
    elif panel.kind == ATTRIBUTE:
        left, right = st.columns([1, 2])
        with left:
            st.markdown(f"**{panel.title}**")
            if panel.description:
                st.caption(panel.description)
        with right:
            st.code(panel.text or "", language=None, wrap_lines=True)
    elif panel.kind == EMPTY:
        st.warning(panel.text or EMPTY_PANEL_TEXT)
    elif panel.kind == ERROR:
        st.error(f"{panel.title}: {panel.text}" if panel.title else (panel.text or ""))


def render_panel(panel: RenderedPanel, key_prefix: str, level: int = 0) -> None:
    """
    Draw a panel tree. Sections get a collapse toggle keyed by panel key so
    their open/closed state survives reruns.

    Args:
        panel: Output of logic.tree.render
        key_prefix: Namespace for widget keys (one per tab)
        level: Nesting depth, used for heading sizes
    """
    if panel.kind not in (ROOT, SECTION):
        _leaf(panel)
        return

    with st.container(border=True):
        _heading(panel, level)
        expanded = True
        if panel.kind == SECTION:
            expanded = st.toggle("Show", value=True, key=f"{key_prefix}:{panel.key}")
        if expanded:
            for child in panel.children:
                render_panel(child, key_prefix, level + 1)


def render_validations(results: Iterable[ValidationResult], era: str, always_open: bool) -> None:
    """Collapsible list of checks with a pass/fail mark and the engine's description."""
    results = list(results)
    counts = summarize(results)
    title = f"Tx Validations - {era}" if era else "Tx Validations"
    with st.expander(f"{title} ({counts['passed']}/{counts['total']} passed)", expanded=always_open):
        if not results:
            st.caption("No validations selected for display.")
        for r in results:
            mark = "✔" if r.value else "✘"
            line = f"{mark} **{r.name}**"
            if r.value:
                st.markdown(line)
            else:
                st.markdown(f":red[{line}]")
            if r.description:
                st.caption(r.description)


_ADDRESS_INTRO = (
    "The decoded bytes follow CIP-0019, which defines three address formats: "
    "Shelley, Stake and Byron."
)


def _shelley_part(label: str, description: str, part: Optional[ShelleyPart]) -> None:
    with st.container(border=True):
        st.markdown(f"#### {label}")
        st.caption(description)
        if part is None or part.is_empty:
            st.warning(EMPTY_PANEL_TEXT)
            return
        st.markdown(f"**kind**: `{part.kind}`")
        if part.hash:
            st.caption("hash")
            st.code(part.hash, language=None, wrap_lines=True)
        if part.pointer:
            st.caption("pointer")
            st.code(part.pointer, language=None)


def render_address(out: AddressOutput) -> None:
    """Shelley, Stake and Byron addresses each get their own layout."""
    if out.error:
        st.error(out.error)
        return
    addr = out.address
    if addr is None:
        st.warning(EMPTY_PANEL_TEXT)
        return

    kind = (addr.kind or "").lower()
    st.markdown("### Decoded " + ("Base58" if kind == "byron" else "Bech32"))
    st.caption(_ADDRESS_INTRO)
    if out.bytes:
        st.caption("address bytes (hex)")
        st.code(out.bytes, language=None, wrap_lines=True)
    st.markdown(f"**type**: `{addr.kind or '?'}`")

    if kind == "byron":
        with st.container(border=True):
            st.markdown("#### CBOR")
            st.caption("Byron addresses are deprecated CBOR structures; keep decoding these bytes with a CBOR decoder.")
            if addr.byron_cbor:
                st.code(addr.byron_cbor, language=None, wrap_lines=True)
            else:
                st.warning(EMPTY_PANEL_TEXT)
        return

    st.markdown(f"**network**: `{addr.network if addr.network is not None else '?'}`")
    if kind != "stake":
        _shelley_part("Payment Part", "Who controls ownership of the locked value.", addr.payment_part)
    _shelley_part("Delegation Part", "Who controls staking of the locked value.", addr.delegation_part)
