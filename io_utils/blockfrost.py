# io_utils/blockfrost.py
"""
Fetch the current protocol parameters of a network from Blockfrost.

Used to pre-fill the configuration form. There is no retry: a failure is
raised as ExternalFetchFailure and the caller keeps the static defaults.
"""

from typing import Any, List, Optional

import requests

from logic.eras import ProtocolParameter, coerce_network
from logic.params import parse_latest_parameters
from utils.config import get_blockfrost_project_id, get_setting
from utils.constants import BLOCKFROST_URL_TEMPLATE, DEFAULT_FETCH_TIMEOUT
from utils.helpers import parse_decimal
from utils.logger import get_logger

logger = get_logger("blockfrost")

LATEST_PARAMETERS_PATH = "/epochs/latest/parameters"


class ExternalFetchFailure(RuntimeError):
    """Raised when the latest parameters cannot be fetched."""


def latest_parameters_url(network) -> str:
    net = coerce_network(network)
    return BLOCKFROST_URL_TEMPLATE.format(network=net.value.lower()) + LATEST_PARAMETERS_PATH


def fetch_latest_parameters(network, project_id: Optional[str] = None, session: Any = None,
                            timeout: Optional[float] = None) -> List[ProtocolParameter]:
    """
    Fetch and translate the latest protocol parameters for ``network``.

    Args:
        network: Network or network name
        project_id: Blockfrost project id; defaults to the configured one for the network
        session: Object with a requests-compatible ``get`` (defaults to the requests module)
        timeout: Seconds; defaults to the ``blockfrost_timeout`` setting

    Returns:
        List of ProtocolParameter in form order

    Raises:
        ExternalFetchFailure: On missing credentials, transport/HTTP errors or an error payload
    """
    net = coerce_network(network)
    project_id = project_id or get_blockfrost_project_id(net.value)
    if not project_id:
        raise ExternalFetchFailure(f"No Blockfrost project id configured for {net.value}")
    if timeout is None:
        timeout = parse_decimal(get_setting("blockfrost_timeout", DEFAULT_FETCH_TIMEOUT)) or DEFAULT_FETCH_TIMEOUT
    http = session or requests
    url = latest_parameters_url(net)

    try:
        response = http.get(url, headers={"project_id": project_id}, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        logger.warning("Fetching latest parameters for %s failed: %s", net.value, e)
        raise ExternalFetchFailure(f"Error fetching protocol parameters for {net.value}: {e}") from e
    except ValueError as e:
        logger.warning("Latest parameters for %s were not JSON: %s", net.value, e)
        raise ExternalFetchFailure(f"Unreadable protocol parameters for {net.value}") from e

    if not isinstance(payload, dict):
        raise ExternalFetchFailure(f"Unexpected protocol parameters payload for {net.value}")
    if payload.get("error"):
        message = payload.get("message") or payload.get("error")
        logger.warning("Blockfrost returned an error for %s: %s", net.value, message)
        raise ExternalFetchFailure(f"Error fetching protocol parameters for {net.value}: {message}")

    logger.info("Fetched latest parameters for %s (epoch %s)", net.value, payload.get("epoch"))
    return parse_latest_parameters(payload)
