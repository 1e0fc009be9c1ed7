import json
import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def load_fixture(name):
    with open(os.path.join(FIXTURES, name), encoding="utf-8") as fh:
        return json.load(fh)


class FakeEngine:
    """Stands in for the native binding; records what it was called with."""

    def __init__(self, tx_response=None, block_response=None, address_response=None, error=None):
        self.tx_response = tx_response
        self.block_response = block_response
        self.address_response = address_response
        self.error = error
        self.calls = []

    def _answer(self, name, response, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error
        return response

    def parse_address(self, raw):
        return self._answer("parse_address", self.address_response, raw)

    def safe_parse_tx(self, raw, context):
        return self._answer("safe_parse_tx", self.tx_response, raw, context)

    def safe_parse_block(self, raw):
        return self._answer("safe_parse_block", self.block_response, raw)


@pytest.fixture
def example_tx_response():
    """Engine answer recorded for the example Babbage transaction."""
    return load_fixture("example_tx_response.json")


@pytest.fixture
def fake_engine(example_tx_response):
    return FakeEngine(tx_response=example_tx_response)
