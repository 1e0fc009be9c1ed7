# utils/config.py
"""
Settings lookup for the app.

Values come from Streamlit secrets first (top level, then the [lace]
table), then from LACE_<NAME> environment variables. Tests and scripts run
without a secrets file, so a missing one is simply skipped.
"""

import os
from typing import Any, Optional

SECRETS_SECTION = "lace"
ENV_PREFIX = "LACE_"


def _from_secrets(name: str) -> Optional[Any]:
    try:
        import streamlit as st
        secrets = st.secrets
        if name in secrets:
            return secrets[name]
        section = secrets.get(SECRETS_SECTION)
        if section is not None and name in section:
            return section[name]
    except Exception:
        # no secrets.toml, or not running under Streamlit
        return None
    return None


def get_setting(name: str, default: Any = None) -> Any:
    """Return the configured value for ``name`` or ``default``."""
    value = _from_secrets(name)
    if value is not None and value != "":
        return value
    env_value = os.environ.get(ENV_PREFIX + name.upper())
    if env_value:
        return env_value
    return default


def get_blockfrost_project_id(network: str) -> Optional[str]:
    """Project id for the Blockfrost endpoint of ``network`` (e.g. Mainnet)."""
    return get_setting(f"blockfrost_project_id_{str(network).lower()}")
