# logic/params.py
"""
Translate a "latest protocol parameters" record into the form vocabulary.

Two record shapes are accepted: the snake_case payload of the public
Blockfrost API (ratios as decimals) and the engine's camelCase record
(ratios as xNumerator / xDenominator pairs).
No Streamlit dependencies.
"""

import re
from typing import Any, Dict, List, Mapping

from utils.constants import DEFAULT_PROTOCOL_PARAMS, RATIO_PARAMS
from utils.helpers import parse_decimal
from .eras import ProtocolParameter

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _form_name(snake_key: str) -> str:
    """min_fee_a -> Min_fee_a, a0 -> A0"""
    return snake_key[:1].upper() + snake_key[1:]


def _normalise_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Snake-case keys and fold numerator/denominator pairs into a single decimal."""
    flat = {_snake(str(k)): v for k, v in record.items()}
    out: Dict[str, Any] = {}
    for key, value in flat.items():
        if key.endswith("_denominator"):
            continue
        if key.endswith("_numerator"):
            base = key[: -len("_numerator")]
            numerator = parse_decimal(value)
            denominator = parse_decimal(flat.get(f"{base}_denominator"))
            if denominator is None or denominator == 0:
                denominator = 1
            out[base] = None if numerator is None else numerator / denominator
            continue
        out[key] = value
    return out


def parse_latest_parameters(record: Mapping[str, Any]) -> List[ProtocolParameter]:
    """
    Map a fetched parameter record onto the default parameter list.

    Args:
        record: Blockfrost or engine parameter record

    Returns:
        List of ProtocolParameter in default order. Names missing from the
        record keep their default value; null or non-scalar values (e.g. an
        absent extra entropy) become 0.
    """
    values = {_form_name(k): v for k, v in _normalise_record(record or {}).items()}
    result: List[ProtocolParameter] = []
    for name, default in DEFAULT_PROTOCOL_PARAMS:
        if name not in values:
            result.append(ProtocolParameter(name, default))
            continue
        raw = values[name]
        if raw is None or isinstance(raw, (dict, list)):
            result.append(ProtocolParameter(name, 0))
            continue
        number = parse_decimal(raw)
        if number is None:
            result.append(ProtocolParameter(name, default))
        elif name not in RATIO_PARAMS and number.is_integer():
            result.append(ProtocolParameter(name, int(number)))
        else:
            result.append(ProtocolParameter(name, number))
    return result
