# utils/constants.py

APP_VERSION = "v1.2.0"
APP_TITLE = "Lace Inspector"

# Networks and eras as carried in the Network / Era form fields
NETWORKS = ["Mainnet", "Preprod", "Preview"]
ERAS = ["Byron", "Shelley MA", "Alonzo", "Babbage", "Conway"]

DEFAULT_NETWORK = "Mainnet"
DEFAULT_ERA = "Babbage"
DEFAULT_BLOCK_SLOT = 72316896

# Form field names
ERA_FIELD = "Era"
NETWORK_FIELD = "Network"
BLOCK_SLOT_FIELD = "Block_slot"

# Default protocol parameters (name, value), in form order
DEFAULT_PROTOCOL_PARAMS = [
    ("Epoch", 478),
    ("Min_fee_a", 44),
    ("Min_fee_b", 155381),
    ("Max_block_size", 90112),
    ("Max_tx_size", 16384),
    ("Max_block_header_size", 1100),
    ("Key_deposit", 2000000),
    ("Pool_deposit", 500000000),
    ("E_max", 18),
    ("N_opt", 500),
    ("A0", 0.3),
    ("Rho", 0.003),
    ("Tau", 0.2),
    ("Decentralisation_param", 0),
    ("Extra_entropy", 0),
    ("Protocol_major_ver", 8),
    ("Protocol_minor_ver", 0),
    ("Min_utxo", 4310),
    ("Min_pool_cost", 170000000),
    ("Price_mem", 0.0577),
    ("Price_step", 0.0000721),
    ("Max_tx_ex_mem", 14000000),
    ("Max_tx_ex_steps", 10000000000),
    ("Max_block_ex_mem", 62000000),
    ("Max_block_ex_steps", 20000000000),
    ("Max_val_size", 5000),
    ("Collateral_percent", 150),
    ("Max_collateral_inputs", 3),
    ("Coins_per_utxo_size", 4310),
    ("Coins_per_utxo_word", 4310),
]

PROTOCOL_PARAM_NAMES = [name for name, _ in DEFAULT_PROTOCOL_PARAMS]

# Parameters whose true value is rational; sent to the engine as numerator/denominator
RATIO_PARAMS = [
    "A0",
    "Rho",
    "Tau",
    "Decentralisation_param",
    "Extra_entropy",
    "Price_mem",
    "Price_step",
]

# Byron uses its own (non-numeric) vocabulary; shown read-only
BYRON_PROTOCOL_PARAMS = [
    ("Script_version", "0"),
    ("Slot_duration", "20000"),
    ("Max_block_size", "2000000"),
    ("Max_header_size", "2000000"),
    ("Max_tx_size", "4096"),
    ("Max_proposal_size", "700"),
    ("Mpc_thd", "20000000000000"),
    ("Heavy_del_thd", "300000000000"),
    ("Update_vote_thd", "1000000000000"),
    ("Update_proposal_thd", "100000000000000"),
    ("Update_implicit", "10000"),
    ("Soft_fork_rule", "(900000000000000, 600000000000000, 50000000000000)"),
    ("Summand", "155381"),
    ("Multiplier", "44"),
    ("Unlock_stake_epoch", "18446744073709551615"),
]

# Default validation names per era
BYRON_VALIDATIONS = [
    "Non empty inputs",
    "Transaction size",
    "Non empty outputs",
    "Outputs have lovelace",
]
SHELLEY_MA_VALIDATIONS = [
    "Transaction size",
    "Non empty inputs",
    "Metadata",
    "Minting",
    "Minimum lovelace",
    "Fees",
    "TTL",
    "Network id",
]
ALONZO_VALIDATIONS = [
    "Non empty inputs",
    "Network ID",
    "Minting",
    "Auxiliary data",
    "Minimum lovelace",
    "Transaction size",
    "Script data hash",
    "Transaction validity interval",
    "Outputs value size",
    "Execution units",
    "Languages",
]
BABBAGE_VALIDATIONS = [
    "Non empty inputs",
    "Minting policy",
    "Well formedness",
    "Auxiliary data",
    "Minimum lovelace",
    "Output value size",
    "Transaction execution units",
    "Transaction size",
    "Validity interval",
    "Network id",
]

# Query parameters carrying the UI options
QP_LIST = "list"
QP_OPEN = "open"
QP_BEGINNING = "beginning"

EMPTY_MARKER = "(empty)"
EMPTY_PANEL_TEXT = "Empty"

BLOCKFROST_URL_TEMPLATE = "https://cardano-{network}.blockfrost.io/api/v0"
DEFAULT_ENGINE_MODULE = "napi_pallas"
DEFAULT_FETCH_TIMEOUT = 10.0

# UI strings
TAB_ICONS = {"tx": "🧾", "address": "🏷", "block": "🧱", "configs": "⚙️"}

EXAMPLE_TX_CBOR = (
    "84a400828258206c732139de33e916342707de2aebef2252c781640326ff37b86ec99d97f1ba8d0182582018f8"
    "6700660fc88d0370a8f95ea58f75507e6b27a18a17925ad3b1777eb0d77600018783581d703a888d65f1679095"
    "0a72daee1f63aa05add6d268434107cfa5b67712821a000f52c6a05820923918e403bf43c34b4ef6b48eb2ee04"
    "babed17320d8d1b9ff9ad086e86f44ec83581d703a888d65f16790950a72daee1f63aa05add6d268434107cfa5"
    "b67712821a000f52c6a0582054ad3c112d58e8946480e21d6a35b2a215d1a9a8f540c13714ded86e4b0b6aea83"
    "581d703a888d65f16790950a72daee1f63aa05add6d268434107cfa5b67712821a000f52c6a05820ed33125018"
    "c5cbc9ae1b242a3ff8f3db2e108e4a63866d0b5238a34502c723ed83581d703a888d65f16790950a72daee1f63"
    "aa05add6d268434107cfa5b67712821a000f52c6a05820b0ea85f16a443da7f60704a427923ae1d89a7dc2d662"
    "1d805d9dd441431ed70083581d703a888d65f16790950a72daee1f63aa05add6d268434107cfa5b67712821a00"
    "0f52c6a05820831a557bc2948e1b8c9f5e8e594d62299abff4eb1a11dc19da38bfaf9f2da40783581d703a888d"
    "65f16790950a72daee1f63aa05add6d268434107cfa5b67712821a000f52c6a05820c695868b4bfbf4c95714e7"
    "07c69da1823bcf8cfc7c4b14b92c3645d4e1943be382581d60b6c8794e9a7a26599440a4d0fd79cd07644d1591"
    "7ff13694f1f672351b00000001af62c125021a0002dfb10b58209dc070b08ae8dbd9ced77831308173284a19ab"
    "4839ce894fca45b8e3752a8a42a2008182582031ae74f8058527afb305d7495b10a99422d9337fc199e1f28044"
    "f2c477a0f94658409d9315424385661b9c17c0c9b96eeb61645d8f18cbefd43aa87677aae8cc2282642650d410"
    "04a11d1d0b66146da9fa22c824e6c1b9e0525268e9a43078fb670c049fd8799f413101ffd905039fa101423131"
    "d8798043313131ffd87980a10142313141319f0102fffff5f6"
)
