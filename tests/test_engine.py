from types import SimpleNamespace

import pytest

from conftest import FakeEngine
from io_utils.engine import (
    EMPTY_INPUT_MESSAGE, AddressOutput, EngineUnavailable, ModuleEngine, SubmissionTracker, TxOutcome,
    accept_tx_outcome, decode_address, decode_block, decode_tx, decode_tx_from_form, load_engine,
)
from logic.context import context_from_state, initial_context_state, with_era
from logic.eras import Era, default_validation_names
from logic.tree import DiagnosticNode
from logic.validations import ValidationReport, ValidationResult, ValidationVisibilityState
from utils.constants import DEFAULT_BLOCK_SLOT, EXAMPLE_TX_CBOR


@pytest.fixture
def default_context():
    return context_from_state(initial_context_state())


class TestExampleTransaction:
    """Example Babbage tx on Mainnet with the default parameters."""

    def test_end_to_end(self, fake_engine):
        outcome = decode_tx_from_form(fake_engine, EXAMPLE_TX_CBOR, lambda: context_from_state(initial_context_state()))
        assert outcome.error is None
        assert outcome.report.era == "Babbage"
        assert not outcome.section.is_error
        assert outcome.section.children[0].topic == "tx"

    def test_engine_receives_camel_case_context(self, fake_engine, default_context):
        decode_tx(fake_engine, "  " + EXAMPLE_TX_CBOR + "\n", default_context)
        name, raw, context = fake_engine.calls[0]
        assert name == "safe_parse_tx"
        assert raw == EXAMPLE_TX_CBOR
        assert context["era"] == "Babbage"
        assert context["network"] == "Mainnet"
        assert context["blockSlot"] == DEFAULT_BLOCK_SLOT
        assert (context["priceMemNumerator"], context["priceMemDenominator"]) == (577, 10000)


class TestDecodeTx:
    def test_empty_input_skips_engine(self, fake_engine, default_context):
        for raw in ["", "   ", None]:
            outcome = decode_tx(fake_engine, raw, default_context)
            assert outcome.error == EMPTY_INPUT_MESSAGE
        assert fake_engine.calls == []

    def test_empty_input_before_context(self, fake_engine):
        def build():
            raise AssertionError("context must not be built for empty input")
        assert decode_tx_from_form(fake_engine, " ", build).error == EMPTY_INPUT_MESSAGE

    def test_byron_rejected_without_engine_call(self, fake_engine):
        state = with_era(initial_context_state(), Era.BYRON)
        outcome = decode_tx_from_form(fake_engine, EXAMPLE_TX_CBOR, lambda: context_from_state(state))
        assert outcome.error and "Byron" in outcome.error
        assert outcome.report.validations == ()
        assert fake_engine.calls == []

    def test_engine_error_section(self, default_context):
        engine = FakeEngine(tx_response={"section": {"error": "decoding error", "attributes": [], "children": []},
                                         "validations": {"validations": [], "era": ""}})
        outcome = decode_tx(engine, "00", default_context)
        assert outcome.error == "decoding error"
        assert outcome.report.validations == ()

    def test_engine_exception_becomes_failure(self, default_context):
        engine = FakeEngine(error=RuntimeError("binding crashed"))
        outcome = decode_tx(engine, "00", default_context)
        assert isinstance(outcome, TxOutcome)
        assert outcome.error == "binding crashed"

    def test_attribute_bag_response(self, default_context):
        """Binding objects with attributes instead of mappings are accepted."""
        section = SimpleNamespace(topic="cbor_parse", identity=None, error=None, bytes=None, attributes=[],
                                  children=[SimpleNamespace(topic="tx", attributes=[], children=[])])
        validations = SimpleNamespace(era="Alonzo", validations=[SimpleNamespace(name="Languages", value=True,
                                                                                 description="ok")])
        engine = FakeEngine(tx_response=SimpleNamespace(section=section, validations=validations))
        outcome = decode_tx(engine, "00", default_context)
        assert outcome.error is None
        assert outcome.section.children[0].topic == "tx"
        assert outcome.report.era == "Alonzo"
        assert outcome.report.validations[0].name == "Languages"


class TestDecodeAddressAndBlock:
    def test_shelley_address(self):
        engine = FakeEngine(address_response={
            "bytes": "01ab",
            "address": {
                "kind": "Shelley",
                "network": "Mainnet",
                "paymentPart": {"isScript": True, "hash": "ab" * 28},
                "delegationPart": {"isScript": False},
            },
        })
        out = decode_address(engine, " addr1xyz ")
        assert engine.calls == [("parse_address", "addr1xyz")]
        assert out.error is None
        assert out.address.kind == "Shelley"
        assert out.address.payment_part.kind == "script"
        assert out.address.delegation_part.is_empty

    def test_byron_address(self):
        engine = FakeEngine(address_response={"bytes": "82d8", "address": {"kind": "Byron", "byronCbor": "82d818"}})
        out = decode_address(engine, "Ae2tdPwUPEZ")
        assert out.address.byron_cbor == "82d818"
        assert out.address.payment_part is None

    def test_address_errors(self):
        assert decode_address(FakeEngine(), "").error == EMPTY_INPUT_MESSAGE
        assert decode_address(FakeEngine(address_response={"error": "invalid bech32"}), "x").error == "invalid bech32"
        assert decode_address(FakeEngine(error=ValueError("bad")), "x") == AddressOutput(error="bad")

    def test_block(self):
        engine = FakeEngine(block_response={"topic": "cbor_parse", "children": [{"topic": "block"}]})
        node = decode_block(engine, "84")
        assert isinstance(node, DiagnosticNode)
        assert node.children[0].topic == "block"

    def test_block_errors(self):
        assert decode_block(FakeEngine(), None).error == EMPTY_INPUT_MESSAGE
        assert decode_block(FakeEngine(error=RuntimeError()), "84").error == "RuntimeError"


class TestEngineLoading:
    def test_camel_case_module(self):
        module = SimpleNamespace(
            parseAddress=lambda raw: {"error": "a"},
            safeParseTx=lambda raw, ctx: {"section": {"topic": "cbor_parse"}},
            safeParseBlock=lambda raw: {"topic": "b"},
        )
        engine = ModuleEngine(module)
        assert engine.parse_address("x") == {"error": "a"}
        assert engine.safe_parse_block("x") == {"topic": "b"}

    def test_missing_entry_point(self):
        with pytest.raises(EngineUnavailable):
            ModuleEngine(SimpleNamespace(parse_address=lambda raw: {}))

    def test_load_missing_module(self):
        with pytest.raises(EngineUnavailable):
            load_engine("lace_inspector_no_such_engine")

    def test_load_module_without_entries(self):
        with pytest.raises(EngineUnavailable):
            load_engine("json")

    def test_load_from_setting(self, monkeypatch):
        monkeypatch.setenv("LACE_ENGINE_MODULE", "lace_inspector_missing_from_env")
        with pytest.raises(EngineUnavailable, match="lace_inspector_missing_from_env"):
            load_engine()


class TestSubmissionTracker:
    def test_latest_wins(self):
        tracker = SubmissionTracker()
        first = tracker.begin()
        second = tracker.begin()
        assert tracker.accept(second, "new") is True
        assert tracker.accept(first, "old") is False
        assert tracker.result == "new"

    def test_sequential(self):
        tracker = SubmissionTracker()
        assert tracker.result is None
        ticket = tracker.begin()
        assert tracker.accept(ticket, TxOutcome.failure("x"))
        assert tracker.result.error == "x"


def _babbage_outcome():
    report = ValidationReport(validations=(ValidationResult("Fee", True),), era="Babbage")
    return TxOutcome(section=DiagnosticNode(), report=report)


class TestAcceptTxOutcome:
    def test_superseded_leaves_visibility_alone(self):
        """A late result for an old ticket must not reset the visible list."""
        tracker = SubmissionTracker()
        visibility = ValidationVisibilityState(visible_names={"Inputs"})
        stale = tracker.begin()
        tracker.begin()
        assert accept_tx_outcome(tracker, stale, _babbage_outcome(), visibility) is False
        assert visibility.active_era is None
        assert visibility.visible_names == {"Inputs"}
        assert tracker.result is None

    def test_latest_reconciles(self):
        tracker = SubmissionTracker()
        visibility = ValidationVisibilityState(visible_names={"Inputs"})
        ticket = tracker.begin()
        outcome = _babbage_outcome()
        assert accept_tx_outcome(tracker, ticket, outcome, visibility) is True
        assert tracker.result is outcome
        assert visibility.active_era == "Babbage"
        assert visibility.visible_names == set(default_validation_names("Babbage"))

    def test_error_outcome_kept_without_reconcile(self):
        tracker = SubmissionTracker()
        visibility = ValidationVisibilityState(visible_names={"Inputs"})
        ticket = tracker.begin()
        assert accept_tx_outcome(tracker, ticket, TxOutcome.failure("bad cbor"), visibility) is True
        assert tracker.result.error == "bad cbor"
        assert visibility.visible_names == {"Inputs"}
