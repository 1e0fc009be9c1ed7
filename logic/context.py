# logic/context.py
"""
Validation context: the editable context state and its translation into the
exact record the engine expects.

The context state is an explicit immutable object; every change goes through
a reducer that returns a new state. build_validation_context is pure and
never raises on bad numeric input: ratio fields fall back to 0/1, other
numeric fields to 0.
No Streamlit dependencies.
"""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from utils.constants import (
    BLOCK_SLOT_FIELD, DEFAULT_BLOCK_SLOT, DEFAULT_PROTOCOL_PARAMS, ERA_FIELD, NETWORK_FIELD,
    PROTOCOL_PARAM_NAMES, RATIO_PARAMS,
)
from utils.helpers import normalize_text, parse_decimal, parse_int
from .eras import Era, Network, ProtocolParameter, coerce_era, coerce_network, profile_for
from .fraction import InvalidParameter, to_fraction


class UnsupportedEra(ValueError):
    """Raised when a context is requested for an era the engine context cannot express."""


@dataclass(frozen=True)
class ValidationContext:
    epoch: int
    min_fee_a: int
    min_fee_b: int
    max_block_size: int
    max_tx_size: int
    max_block_header_size: int
    key_deposit: int
    pool_deposit: int
    e_max: int
    n_opt: int
    a0_numerator: int
    a0_denominator: int
    rho_numerator: int
    rho_denominator: int
    tau_numerator: int
    tau_denominator: int
    decentralisation_param_numerator: int
    decentralisation_param_denominator: int
    extra_entropy_numerator: int
    extra_entropy_denominator: int
    protocol_major_ver: int
    protocol_minor_ver: int
    min_utxo: int
    min_pool_cost: int
    price_mem_numerator: int
    price_mem_denominator: int
    price_step_numerator: int
    price_step_denominator: int
    max_tx_ex_mem: int
    max_tx_ex_steps: int
    max_block_ex_mem: int
    max_block_ex_steps: int
    max_val_size: int
    collateral_percent: int
    max_collateral_inputs: int
    coins_per_utxo_size: int
    coins_per_utxo_word: int
    network: str
    era: str
    block_slot: int

    def to_engine_dict(self) -> Dict[str, Any]:
        """camelCase mapping in the shape the engine binding takes (minFeeA, a0Numerator, blockSlot...)."""
        return {_camel(k): v for k, v in asdict(self).items()}


def _camel(snake: str) -> str:
    head, *rest = snake.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _field_key(param_name: str) -> str:
    """Form name -> ValidationContext field prefix (Min_fee_a -> min_fee_a)."""
    return param_name.lower()


def _ratio(raw: Any) -> Tuple[int, int]:
    value = parse_decimal(raw)
    if value is None:
        return 0, 1
    try:
        return to_fraction(value)
    except InvalidParameter:
        return 0, 1


def build_validation_context(raw_fields: Mapping[str, Any], selected_era, selected_network,
                             block_slot=None) -> ValidationContext:
    """
    Assemble the engine's validation context from raw form fields.

    Args:
        raw_fields: Form field name -> raw (usually string) value
        selected_era: Era or era name
        selected_network: Network or network name
        block_slot: Slot used for time-dependent checks; when None the
            Block_slot form field is used

    Returns:
        ValidationContext with every field populated

    Raises:
        UnsupportedEra: If the era has no numeric parameter vocabulary (Byron)
    """
    era = coerce_era(selected_era)
    if not profile_for(era).translatable:
        raise UnsupportedEra(f"{era.value} transactions cannot be validated against a protocol context")
    network = coerce_network(selected_network)
    raw_fields = raw_fields or {}

    values: Dict[str, Any] = {}
    for name in PROTOCOL_PARAM_NAMES:
        key = _field_key(name)
        if name in RATIO_PARAMS:
            values[f"{key}_numerator"], values[f"{key}_denominator"] = _ratio(raw_fields.get(name))
        else:
            values[key] = parse_int(raw_fields.get(name))

    if block_slot is None:
        block_slot = raw_fields.get(BLOCK_SLOT_FIELD)
    values["block_slot"] = parse_int(block_slot)
    values["era"] = era.value
    values["network"] = network.value
    return ValidationContext(**values)


# ---------------------------------------------------------------------------
# Context state and reducers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ContextState:
    """What the configuration tab edits: era, network, slot and parameter values."""
    era: Era = Era.BABBAGE
    network: Network = Network.MAINNET
    block_slot: int = DEFAULT_BLOCK_SLOT
    parameters: Tuple[ProtocolParameter, ...] = field(
        default_factory=lambda: tuple(ProtocolParameter(n, v) for n, v in DEFAULT_PROTOCOL_PARAMS)
    )

    @property
    def is_translatable(self) -> bool:
        return profile_for(self.era).translatable

    def visible_parameters(self) -> Tuple[ProtocolParameter, ...]:
        """Parameters shown for the selected era (Byron shows its legacy vocabulary)."""
        if not self.is_translatable:
            return profile_for(self.era).parameters
        return self.parameters


def initial_context_state() -> ContextState:
    return ContextState()


def with_era(state: ContextState, era) -> ContextState:
    return replace(state, era=coerce_era(era))


def with_network(state: ContextState, network,
                 fetched: Optional[Mapping[str, Iterable[ProtocolParameter]]] = None) -> ContextState:
    """
    Switch network. When parameters were already fetched for the new network
    (``fetched`` maps network name -> parameter list) they are applied again.
    """
    new_network = coerce_network(network)
    state = replace(state, network=new_network)
    cached = (fetched or {}).get(new_network.value)
    if cached:
        state = with_parameters(state, cached)
    return state


def with_block_slot(state: ContextState, block_slot) -> ContextState:
    return replace(state, block_slot=parse_int(block_slot, default=state.block_slot))


def with_parameter(state: ContextState, name: str, value) -> ContextState:
    """
    Set one parameter; unparseable or negative edits keep the previous value.

    Ratio parameters are kept as decimals, the others as exact integers.
    """
    if name in RATIO_PARAMS:
        number = parse_decimal(value)
        if number is not None and number.is_integer():
            number = int(number)
    else:
        number = parse_int(value, default=None)
    if number is None or number < 0:
        return state
    updated = tuple(
        ProtocolParameter(p.name, number) if p.name == name else p
        for p in state.parameters
    )
    return replace(state, parameters=updated)


def with_parameters(state: ContextState, parameters: Iterable[ProtocolParameter]) -> ContextState:
    """Apply a fetched parameter list; names outside the vocabulary are ignored."""
    incoming = {p.name: p.value for p in parameters}
    updated = tuple(
        ProtocolParameter(p.name, incoming[p.name]) if p.name in incoming else p
        for p in state.parameters
    )
    return replace(state, parameters=updated)


def to_form_fields(state: ContextState) -> Dict[str, str]:
    """Raw form mapping for build_validation_context."""
    form = {p.name: normalize_text(p.value) for p in state.parameters}
    form[ERA_FIELD] = state.era.value
    form[NETWORK_FIELD] = state.network.value
    form[BLOCK_SLOT_FIELD] = str(state.block_slot)
    return form


def form_fields_from_defaults(era=Era.BABBAGE, network=Network.MAINNET,
                              block_slot: int = DEFAULT_BLOCK_SLOT) -> Dict[str, str]:
    """Form mapping used by the example submission."""
    return to_form_fields(ContextState(era=coerce_era(era), network=coerce_network(network),
                                       block_slot=block_slot))


def context_from_state(state: ContextState) -> ValidationContext:
    return build_validation_context(to_form_fields(state), state.era, state.network, state.block_slot)


CONTEXT_FIELD_NAMES = [f.name for f in fields(ValidationContext)]
