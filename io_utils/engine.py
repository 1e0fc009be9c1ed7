# io_utils/engine.py
"""
Boundary to the external decoding/validation engine.

The engine is a native binding that parses addresses, transactions and
blocks and evaluates ledger rules. Nothing here decodes bytes: this module
loads the binding, hands it the validation context, and converts what comes
back into DiagnosticNode / ValidationReport / AddressOutput values. Engine
failures never escape as exceptions; they come back as error results.
"""

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol

from logic.context import UnsupportedEra, ValidationContext
from logic.tree import DiagnosticNode
from logic.validations import ValidationReport, ValidationVisibilityState
from utils.config import get_setting
from utils.constants import DEFAULT_ENGINE_MODULE
from utils.helpers import normalize_text
from utils.logger import get_logger

logger = get_logger("engine")

EMPTY_INPUT_MESSAGE = "Nothing to dissect: enter a hex-encoded CBOR value."


class EngineUnavailable(RuntimeError):
    """Raised when the engine binding cannot be loaded."""


class DecodeEngine(Protocol):
    def parse_address(self, raw: str) -> Mapping[str, Any]: ...

    def safe_parse_tx(self, raw: str, context: Mapping[str, Any]) -> Mapping[str, Any]: ...

    def safe_parse_block(self, raw: str) -> Mapping[str, Any]: ...


class ModuleEngine:
    """DecodeEngine over an imported binding module (snake_case or camelCase entry points)."""

    def __init__(self, module: Any):
        self.module = module
        self._parse_address = self._entry("parse_address", "parseAddress")
        self._safe_parse_tx = self._entry("safe_parse_tx", "safeParseTx")
        self._safe_parse_block = self._entry("safe_parse_block", "safeParseBlock")

    def _entry(self, *names: str) -> Callable:
        for name in names:
            fn = getattr(self.module, name, None)
            if callable(fn):
                return fn
        raise EngineUnavailable(
            f"Engine module '{getattr(self.module, '__name__', self.module)}' has no '{names[0]}' entry point"
        )

    def parse_address(self, raw: str) -> Mapping[str, Any]:
        return self._parse_address(raw)

    def safe_parse_tx(self, raw: str, context: Mapping[str, Any]) -> Mapping[str, Any]:
        return self._safe_parse_tx(raw, context)

    def safe_parse_block(self, raw: str) -> Mapping[str, Any]:
        return self._safe_parse_block(raw)


def load_engine(module_name: Optional[str] = None) -> ModuleEngine:
    """
    Import the engine binding.

    Args:
        module_name: Import path; defaults to the ``engine_module`` setting

    Raises:
        EngineUnavailable: If the module cannot be imported or lacks an entry point
    """
    name = module_name or get_setting("engine_module", DEFAULT_ENGINE_MODULE)
    try:
        module = importlib.import_module(name)
    except ImportError as e:
        logger.error("Engine module %s could not be imported: %s", name, e)
        raise EngineUnavailable(f"Decoding engine '{name}' is not installed") from e
    engine = ModuleEngine(module)
    logger.info("Loaded engine module %s", name)
    return engine


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

def _plain(data: Any) -> Any:
    """Deep-convert binding objects (attribute bags) into dicts and lists."""
    if isinstance(data, Mapping):
        return {k: _plain(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(v) for v in data]
    if hasattr(data, "__dict__"):
        return {k: _plain(v) for k, v in vars(data).items() if not k.startswith("_")}
    return data


def _get(data: Any, *keys: str) -> Any:
    """First present key of a mapping."""
    if not isinstance(data, Mapping):
        return None
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class ShelleyPart:
    is_script: bool = False
    hash: Optional[str] = None
    pointer: Optional[str] = None

    @property
    def kind(self) -> str:
        return "script" if self.is_script else "verification key"

    @property
    def is_empty(self) -> bool:
        return not self.hash and not self.pointer

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ShelleyPart"]:
        if data is None:
            return None
        return cls(
            is_script=bool(_get(data, "is_script", "isScript")),
            hash=_get(data, "hash"),
            pointer=_get(data, "pointer"),
        )


@dataclass(frozen=True)
class AddressDiagnostic:
    kind: str
    network: Optional[str] = None
    payment_part: Optional[ShelleyPart] = None
    delegation_part: Optional[ShelleyPart] = None
    byron_cbor: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AddressDiagnostic":
        return cls(
            kind=normalize_text(_get(data, "kind")),
            network=_get(data, "network"),
            payment_part=ShelleyPart.from_dict(_get(data, "payment_part", "paymentPart")),
            delegation_part=ShelleyPart.from_dict(_get(data, "delegation_part", "delegationPart")),
            byron_cbor=_get(data, "byron_cbor", "byronCbor"),
        )


@dataclass(frozen=True)
class AddressOutput:
    error: Optional[str] = None
    bytes: Optional[str] = None
    address: Optional[AddressDiagnostic] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AddressOutput":
        address = _get(data, "address")
        return cls(
            error=_get(data, "error"),
            bytes=_get(data, "bytes"),
            address=AddressDiagnostic.from_dict(address) if address is not None else None,
        )


@dataclass(frozen=True)
class TxOutcome:
    section: DiagnosticNode
    report: ValidationReport = ValidationReport()

    @property
    def error(self) -> Optional[str]:
        return self.section.error

    @classmethod
    def failure(cls, message: str) -> "TxOutcome":
        return cls(section=DiagnosticNode.failure(message))


def _node(data: Any) -> DiagnosticNode:
    if isinstance(data, DiagnosticNode):
        return data
    return DiagnosticNode.from_dict(_plain(data) or {})


# ---------------------------------------------------------------------------
# Calls
# ---------------------------------------------------------------------------

def decode_address(engine: DecodeEngine, raw: Optional[str]) -> AddressOutput:
    text = normalize_text(raw)
    if not text:
        return AddressOutput(error=EMPTY_INPUT_MESSAGE)
    logger.info("Parsing address (%d chars)", len(text))
    try:
        out = AddressOutput.from_dict(_plain(engine.parse_address(text)))
    except Exception as e:
        logger.exception("Engine failed on address")
        return AddressOutput(error=str(e) or type(e).__name__)
    if out.error:
        logger.info("Engine reported address error: %s", out.error)
    return out


def decode_tx(engine: DecodeEngine, raw: Optional[str], context: ValidationContext) -> TxOutcome:
    """
    Decode and validate a transaction.

    Args:
        engine: Loaded engine
        raw: Hex-encoded CBOR
        context: Validation context built for the selected era/network

    Returns:
        TxOutcome; on failure its section carries the error and the report is empty
    """
    text = normalize_text(raw)
    if not text:
        return TxOutcome.failure(EMPTY_INPUT_MESSAGE)
    logger.info("Dissecting tx (%d chars) era=%s network=%s slot=%s",
                len(text), context.era, context.network, context.block_slot)
    try:
        out = _plain(engine.safe_parse_tx(text, context.to_engine_dict()))
        section = _node(_get(out, "section"))
        report = ValidationReport.from_dict(_get(out, "validations"))
    except Exception as e:
        logger.exception("Engine failed on tx")
        return TxOutcome.failure(str(e) or type(e).__name__)
    if section.error:
        logger.info("Engine reported tx error: %s", section.error)
        return TxOutcome(section=section)
    return TxOutcome(section=section, report=report)


def decode_tx_from_form(engine: DecodeEngine, raw: Optional[str], build_context: Callable[[], ValidationContext]) -> TxOutcome:
    """
    Build the context and decode.

    An empty payload is rejected before the context is built; an era the
    builder rejects (Byron) is reported without calling the engine.
    """
    if not normalize_text(raw):
        return TxOutcome.failure(EMPTY_INPUT_MESSAGE)
    try:
        context = build_context()
    except UnsupportedEra as e:
        logger.info("Rejected submission: %s", e)
        return TxOutcome.failure(str(e))
    return decode_tx(engine, raw, context)


def decode_block(engine: DecodeEngine, raw: Optional[str]) -> DiagnosticNode:
    text = normalize_text(raw)
    if not text:
        return DiagnosticNode.failure(EMPTY_INPUT_MESSAGE)
    logger.info("Dissecting block (%d chars)", len(text))
    try:
        node = _node(engine.safe_parse_block(text))
    except Exception as e:
        logger.exception("Engine failed on block")
        return DiagnosticNode.failure(str(e) or type(e).__name__)
    if node.error:
        logger.info("Engine reported block error: %s", node.error)
    return node


# ---------------------------------------------------------------------------
# Superseded submissions
# ---------------------------------------------------------------------------

class SubmissionTracker:
    """
    Keeps only the latest submission's result.

    begin() hands out a ticket; accept() stores a result only while its
    ticket is still the newest one.
    """

    def __init__(self):
        self.nonce = 0
        self.result: Any = None

    def begin(self) -> int:
        self.nonce += 1
        return self.nonce

    def accept(self, ticket: int, result: Any) -> bool:
        if ticket != self.nonce:
            logger.info("Discarding superseded submission %d (current %d)", ticket, self.nonce)
            return False
        self.result = result
        return True


def accept_tx_outcome(tracker: SubmissionTracker, ticket: int, outcome: TxOutcome,
                      visibility: ValidationVisibilityState) -> bool:
    """
    Store a tx decode result and fold its report into the visibility state.

    A superseded ticket changes neither the tracker nor the visibility state.

    Returns:
        True when the outcome was kept.
    """
    if not tracker.accept(ticket, outcome):
        return False
    if not outcome.error:
        visibility.reconcile(outcome.report)
    return True
