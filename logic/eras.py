# logic/eras.py
"""
Per-era profiles: parameter vocabulary and default validation list.

Each era is defined exactly once in ERA_PROFILES; the rest of the code
looks behaviour up here instead of branching on era names.
No Streamlit dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from utils.constants import (
    ALONZO_VALIDATIONS, BABBAGE_VALIDATIONS, BYRON_PROTOCOL_PARAMS, BYRON_VALIDATIONS,
    DEFAULT_ERA, DEFAULT_NETWORK, DEFAULT_PROTOCOL_PARAMS, SHELLEY_MA_VALIDATIONS,
)
from utils.helpers import normalize_text


class Era(str, Enum):
    BYRON = "Byron"
    SHELLEY_MA = "Shelley MA"
    ALONZO = "Alonzo"
    BABBAGE = "Babbage"
    CONWAY = "Conway"


class Network(str, Enum):
    MAINNET = "Mainnet"
    PREPROD = "Preprod"
    PREVIEW = "Preview"


@dataclass(frozen=True)
class ProtocolParameter:
    name: str
    value: object


@dataclass(frozen=True)
class EraProfile:
    """
    What the app knows about an era.

    ``validations`` is None when the era has no fixed list; its defaults are
    then whatever the engine reports. ``translatable`` is False for eras
    whose parameters cannot be turned into a ValidationContext.
    """
    era: Era
    parameters: Tuple[ProtocolParameter, ...]
    validations: Optional[Tuple[str, ...]]
    translatable: bool = True


def _params(pairs) -> Tuple[ProtocolParameter, ...]:
    return tuple(ProtocolParameter(name, value) for name, value in pairs)


_NUMERIC_PARAMS = _params(DEFAULT_PROTOCOL_PARAMS)

ERA_PROFILES = {
    Era.BYRON: EraProfile(Era.BYRON, _params(BYRON_PROTOCOL_PARAMS), tuple(BYRON_VALIDATIONS), translatable=False),
    Era.SHELLEY_MA: EraProfile(Era.SHELLEY_MA, _NUMERIC_PARAMS, tuple(SHELLEY_MA_VALIDATIONS)),
    Era.ALONZO: EraProfile(Era.ALONZO, _NUMERIC_PARAMS, tuple(ALONZO_VALIDATIONS)),
    Era.BABBAGE: EraProfile(Era.BABBAGE, _NUMERIC_PARAMS, tuple(BABBAGE_VALIDATIONS)),
    Era.CONWAY: EraProfile(Era.CONWAY, _NUMERIC_PARAMS, None),
}

assert set(ERA_PROFILES) == set(Era), "every era needs a profile"


def find_era(value) -> Optional[Era]:
    """Map an Era, its value or its name to an Era; None when unknown."""
    if isinstance(value, Era):
        return value
    text = normalize_text(value)
    for era in Era:
        if text == era.value or text.upper() == era.name:
            return era
    return None


def coerce_era(value) -> Era:
    """Like find_era, falling back to the default era."""
    era = find_era(value)
    return era if era is not None else Era(DEFAULT_ERA)


def coerce_network(value) -> Network:
    """Same as coerce_era, for networks (case-insensitive)."""
    if isinstance(value, Network):
        return value
    text = normalize_text(value).lower()
    for network in Network:
        if text == network.value.lower():
            return network
    return Network(DEFAULT_NETWORK)


def profile_for(era) -> EraProfile:
    return ERA_PROFILES[coerce_era(era)]


def default_validation_names(era, results: Iterable = ()) -> List[str]:
    """
    Full default validation list for ``era``.

    Eras without a fixed list use the names of ``results`` (objects with a
    ``name`` attribute or plain strings), in order, without duplicates.
    """
    known = find_era(era)
    if known is not None and ERA_PROFILES[known].validations is not None:
        return list(ERA_PROFILES[known].validations)
    names: List[str] = []
    for r in results:
        name = r if isinstance(r, str) else getattr(r, "name", None)
        if name and name not in names:
            names.append(name)
    return names
