import time

import pytest

from logic.context import (
    CONTEXT_FIELD_NAMES, ContextState, UnsupportedEra, ValidationContext, build_validation_context,
    context_from_state, form_fields_from_defaults, initial_context_state, to_form_fields,
    with_block_slot, with_era, with_network, with_parameter, with_parameters,
)
from logic.eras import (
    ERA_PROFILES, Era, Network, ProtocolParameter, coerce_era, coerce_network, default_validation_names,
    find_era, profile_for,
)
from logic.validations import ValidationResult
from utils.constants import BABBAGE_VALIDATIONS, BYRON_PROTOCOL_PARAMS, DEFAULT_BLOCK_SLOT


@pytest.fixture
def default_form():
    return form_fields_from_defaults()


class TestEras:
    """Test the era profiles and coercion helpers."""

    def test_every_era_has_a_profile(self):
        assert set(ERA_PROFILES) == set(Era)

    def test_find_era(self):
        assert find_era("Shelley MA") is Era.SHELLEY_MA
        assert find_era("conway") is Era.CONWAY
        assert find_era(Era.ALONZO) is Era.ALONZO
        assert find_era("Dijkstra") is None

    def test_coerce_defaults(self):
        assert coerce_era("nope") is Era.BABBAGE
        assert coerce_network("PREPROD") is Network.PREPROD
        assert coerce_network(None) is Network.MAINNET

    def test_byron_not_translatable(self):
        assert profile_for(Era.BYRON).translatable is False
        assert all(profile_for(e).translatable for e in Era if e is not Era.BYRON)

    def test_default_validation_names_fixed_list(self):
        assert default_validation_names(Era.BABBAGE) == BABBAGE_VALIDATIONS

    def test_default_validation_names_conway_uses_results(self):
        """Conway has no fixed list: the names in the results, in order, without duplicates."""
        results = [ValidationResult("A", True), ValidationResult("B", False), ValidationResult("A", True)]
        assert default_validation_names(Era.CONWAY, results) == ["A", "B"]
        assert default_validation_names("Unknown era", ["x", "y"]) == ["x", "y"]


class TestBuildValidationContext:
    """Test build_validation_context."""

    def test_default_babbage_context(self, default_form):
        """Default parameters for Babbage on Mainnet."""
        ctx = build_validation_context(default_form, "Babbage", "Mainnet")
        assert ctx.era == "Babbage"
        assert ctx.network == "Mainnet"
        assert ctx.block_slot == DEFAULT_BLOCK_SLOT
        assert ctx.epoch == 478
        assert ctx.min_fee_a == 44
        assert ctx.min_fee_b == 155381
        assert (ctx.a0_numerator, ctx.a0_denominator) == (3, 10)
        assert (ctx.rho_numerator, ctx.rho_denominator) == (3, 1000)
        assert (ctx.tau_numerator, ctx.tau_denominator) == (1, 5)
        assert (ctx.price_mem_numerator, ctx.price_mem_denominator) == (577, 10000)
        assert (ctx.price_step_numerator, ctx.price_step_denominator) == (721, 10000000)
        assert (ctx.decentralisation_param_numerator, ctx.decentralisation_param_denominator) == (0, 1)
        assert ctx.max_tx_ex_steps == 10000000000

    def test_every_field_populated(self, default_form):
        ctx = build_validation_context(default_form, Era.ALONZO, Network.PREVIEW)
        for name in CONTEXT_FIELD_NAMES:
            assert getattr(ctx, name) is not None
        assert ctx.era == "Alonzo"
        assert ctx.network == "Preview"

    def test_bad_numbers_fall_back(self, default_form):
        """Unparseable ratio -> 0/1, unparseable integer -> 0; never raises."""
        form = dict(default_form, A0="abc", Min_fee_a="", Rho="nan", Max_tx_size="x1")
        ctx = build_validation_context(form, "Babbage", "Mainnet")
        assert (ctx.a0_numerator, ctx.a0_denominator) == (0, 1)
        assert (ctx.rho_numerator, ctx.rho_denominator) == (0, 1)
        assert ctx.min_fee_a == 0
        assert ctx.max_tx_size == 0

    def test_missing_fields(self):
        ctx = build_validation_context({}, "Conway", "Preprod")
        assert ctx.epoch == 0
        assert (ctx.tau_numerator, ctx.tau_denominator) == (0, 1)
        assert ctx.block_slot == 0

    def test_integral_decimal_accepted(self, default_form):
        form = dict(default_form, Min_fee_a="44.0", Max_tx_ex_steps="1e10")
        ctx = build_validation_context(form, "Babbage", "Mainnet")
        assert ctx.min_fee_a == 44
        assert ctx.max_tx_ex_steps == 10000000000

    @pytest.mark.parametrize("huge", ["1e2000000", "1e20000000", "-1e2000000"])
    def test_huge_exponent_falls_back_fast(self, default_form, huge):
        """Exponent spellings far past the integer range give 0 without expanding the number."""
        form = dict(default_form, Epoch=huge)
        started = time.perf_counter()
        ctx = build_validation_context(form, "Babbage", "Mainnet")
        assert time.perf_counter() - started < 1.0
        assert ctx.epoch == 0
        assert ctx.min_fee_a == 44

    def test_deterministic(self, default_form):
        first = build_validation_context(default_form, "Babbage", "Mainnet")
        second = build_validation_context(default_form, "Babbage", "Mainnet")
        assert first == second
        assert first.to_engine_dict() == second.to_engine_dict()

    def test_negative_values_pass_through(self, default_form):
        """The builder does not clamp; negatives are rejected earlier, by the form reducers."""
        form = dict(default_form, Min_fee_a="-5", A0="-0.5")
        ctx = build_validation_context(form, "Babbage", "Mainnet")
        assert ctx.min_fee_a == -5
        assert (ctx.a0_numerator, ctx.a0_denominator) == (-1, 2)

    def test_explicit_block_slot_wins(self, default_form):
        ctx = build_validation_context(default_form, "Babbage", "Mainnet", block_slot=123)
        assert ctx.block_slot == 123

    def test_byron_rejected(self, default_form):
        with pytest.raises(UnsupportedEra):
            build_validation_context(default_form, "Byron", "Mainnet")

    def test_engine_dict_keys(self, default_form):
        data = build_validation_context(default_form, "Babbage", "Mainnet").to_engine_dict()
        assert data["minFeeA"] == 44
        assert data["a0Numerator"] == 3
        assert data["a0Denominator"] == 10
        assert data["eMax"] == 18
        assert data["blockSlot"] == DEFAULT_BLOCK_SLOT
        assert data["coinsPerUtxoWord"] == 4310
        assert len(data) == len(CONTEXT_FIELD_NAMES) == 40


class TestContextState:
    """Test the context state reducers."""

    def test_initial(self):
        state = initial_context_state()
        assert state.era is Era.BABBAGE
        assert state.network is Network.MAINNET
        assert state.block_slot == DEFAULT_BLOCK_SLOT
        assert state.is_translatable

    def test_reducers_return_new_state(self):
        state = initial_context_state()
        changed = with_era(with_network(state, "Preview"), "Conway")
        assert changed is not state
        assert state.era is Era.BABBAGE
        assert changed.era is Era.CONWAY
        assert changed.network is Network.PREVIEW

    def test_network_switch_reapplies_fetched_parameters(self):
        """Parameters fetched earlier for a network come back when it is selected again."""
        fetched = {"Preview": [ProtocolParameter("Epoch", 600), ProtocolParameter("Min_fee_a", 50)]}
        state = with_network(initial_context_state(), "Preview", fetched)
        values = dict((p.name, p.value) for p in state.parameters)
        assert state.network is Network.PREVIEW
        assert values["Epoch"] == 600
        assert values["Min_fee_a"] == 50

    def test_network_switch_without_fetched_parameters(self):
        state = with_parameter(initial_context_state(), "Epoch", "500")
        fetched = {"Preview": [ProtocolParameter("Epoch", 600)]}
        switched = with_network(state, "Preprod", fetched)
        assert switched.network is Network.PREPROD
        assert switched.parameters == state.parameters

    def test_block_slot(self):
        state = with_block_slot(initial_context_state(), "100")
        assert state.block_slot == 100
        assert with_block_slot(state, "junk").block_slot == 100

    def test_with_parameter(self):
        state = with_parameter(initial_context_state(), "Min_fee_a", "45")
        assert dict((p.name, p.value) for p in state.parameters)["Min_fee_a"] == 45
        state = with_parameter(state, "A0", "0.25")
        assert dict((p.name, p.value) for p in state.parameters)["A0"] == 0.25

    def test_with_parameter_keeps_large_integers_exact(self):
        state = with_parameter(initial_context_state(), "Max_tx_ex_steps", "20000000000000000001")
        value = dict((p.name, p.value) for p in state.parameters)["Max_tx_ex_steps"]
        assert isinstance(value, int)
        assert value == 20000000000000000001
        assert context_from_state(state).max_tx_ex_steps == 20000000000000000001

    def test_with_parameter_integral_spellings(self):
        state = with_parameter(initial_context_state(), "Min_fee_a", "44.0")
        value = dict((p.name, p.value) for p in state.parameters)["Min_fee_a"]
        assert value == 44 and isinstance(value, int)

    @pytest.mark.parametrize("bad", ["-1", "abc", "", None, "1e2000000"])
    def test_with_parameter_rejects(self, bad):
        """Negative or unparseable edits keep the previous state."""
        state = initial_context_state()
        assert with_parameter(state, "Min_fee_a", bad) is state

    def test_with_parameters_ignores_unknown(self):
        state = with_parameters(initial_context_state(), [
            ProtocolParameter("Epoch", 500), ProtocolParameter("Not_a_param", 1),
        ])
        names = [p.name for p in state.parameters]
        assert "Not_a_param" not in names
        assert dict((p.name, p.value) for p in state.parameters)["Epoch"] == 500

    def test_byron_shows_legacy_parameters(self):
        state = with_era(initial_context_state(), Era.BYRON)
        assert not state.is_translatable
        assert [p.name for p in state.visible_parameters()] == [n for n, _ in BYRON_PROTOCOL_PARAMS]

    def test_form_fields(self):
        form = to_form_fields(with_block_slot(initial_context_state(), 5))
        assert form["Era"] == "Babbage"
        assert form["Network"] == "Mainnet"
        assert form["Block_slot"] == "5"
        assert form["A0"] == "0.3"

    def test_context_from_state(self):
        state = with_parameter(with_era(initial_context_state(), "Alonzo"), "Rho", "0.5")
        ctx = context_from_state(state)
        assert isinstance(ctx, ValidationContext)
        assert ctx.era == "Alonzo"
        assert (ctx.rho_numerator, ctx.rho_denominator) == (1, 2)

    def test_context_from_byron_state(self):
        with pytest.raises(UnsupportedEra):
            context_from_state(ContextState(era=Era.BYRON))
