# io package
from .engine import (
    # Engine loading
    EngineUnavailable,
    DecodeEngine,
    ModuleEngine,
    load_engine,

    # Results
    AddressDiagnostic,
    AddressOutput,
    ShelleyPart,
    TxOutcome,

    # Calls
    decode_address,
    decode_tx,
    decode_tx_from_form,
    decode_block,
    SubmissionTracker,
    EMPTY_INPUT_MESSAGE
)
from .blockfrost import (
    ExternalFetchFailure,
    fetch_latest_parameters,
    latest_parameters_url
)

__all__ = [
    'EngineUnavailable',
    'DecodeEngine',
    'ModuleEngine',
    'load_engine',
    'AddressDiagnostic',
    'AddressOutput',
    'ShelleyPart',
    'TxOutcome',
    'decode_address',
    'decode_tx',
    'decode_tx_from_form',
    'decode_block',
    'SubmissionTracker',
    'EMPTY_INPUT_MESSAGE',
    'ExternalFetchFailure',
    'fetch_latest_parameters',
    'latest_parameters_url'
]
