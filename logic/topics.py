# logic/topics.py
"""Human-readable titles and descriptions for the topic keys the engine emits."""

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class TopicMeta:
    title: str
    description: Optional[str] = None


def get_topic_meta(key: Optional[str], catalog: Mapping[str, TopicMeta]) -> TopicMeta:
    """Catalog entry for ``key``; unknown keys use the raw key as title."""
    if key and key in catalog:
        return catalog[key]
    return TopicMeta(title=key or "")


TX_TOPICS = {
    "cbor_parse": TopicMeta(
        "Valid CBOR data",
        "Your HEX bytes were successfully decoded using the CBOR standard.",
    ),
    "tx": TopicMeta(
        "A valid Cardano Transaction",
        "Your CBOR data was successfully interpreted as a Cardano transaction.",
    ),
    "era": TopicMeta(
        "Era used for decoding",
        "Transactions belong to specific eras and their structure differs slightly between "
        "them. The payload carries no era tag, so decoding uses the era selected in the "
        "configuration.",
    ),
    "tx_hash": TopicMeta("Transaction hash", "The identifier of the transaction, a hash of its body."),
    "fee": TopicMeta(
        "Fee",
        "The amount of lovelace this transaction pays to the protocol. Fees are deterministic "
        "and known before the transaction is submitted.",
    ),
    "start": TopicMeta("Validity start", "The first slot where the transaction is valid."),
    "ttl": TopicMeta(
        "Time to live",
        "The last slot where the transaction remains valid. After it, no node accepts the "
        "transaction into a block.",
    ),
    "tx_inputs": TopicMeta(
        "Transaction Inputs",
        "Outputs of previous transactions consumed by this one, expressed as pointers to "
        "those outputs.",
    ),
    "input": TopicMeta("Transaction Input"),
    "tx_input_hash": TopicMeta(
        "input tx hash",
        "Hash (id) of the transaction holding the output being consumed.",
    ),
    "tx_input_index": TopicMeta(
        "output index",
        "Position of the consumed output within the source transaction.",
    ),
    "tx_collateral": TopicMeta(
        "Collateral",
        "Inputs forfeited if a script in this transaction fails validation.",
    ),
    "collateral": TopicMeta("Collateral Input"),
    "tx_total_collateral": TopicMeta("Total collateral"),
    "tx_outputs": TopicMeta(
        "Transaction Outputs",
        "The outputs (UTxO) created by this transaction. Each one holds a set of assets and "
        "the address that controls them.",
    ),
    "output": TopicMeta("Transaction Output"),
    "tx_output_address": TopicMeta(
        "Address",
        "The address that has control over the assets in this output.",
    ),
    "tx_output_lovelace": TopicMeta(
        "Lovelace amount (1/1000000 ADA)",
        "The amount of lovelace contained in this output.",
    ),
    "tx_output_datum": TopicMeta("Output datum"),
    "tx_output_datum_hash": TopicMeta("Datum hash"),
    "tx_output_assets": TopicMeta("Native assets"),
    "tx_output_asset_policy": TopicMeta("Asset policy"),
    "tx_output_asset_policy_id": TopicMeta("Policy id"),
    "tx_output_asset_policy_assets": TopicMeta("Assets"),
    "tx_output_asset_policy_asset": TopicMeta("Asset"),
    "tx_metadata": TopicMeta(
        "Transaction Metadata",
        "Extra data attached to the transaction. It annotates the transaction for further "
        "processing and has no effect on the ledger state.",
    ),
    "tx_metadatum": TopicMeta("Metadatum"),
    "tx_metadata_label": TopicMeta("Label"),
    "tx_metadatum_value": TopicMeta("Value"),
    "tx_witnesses": TopicMeta(
        "Transaction Witnesses",
        "Evidence required by the protocol to assert the validity of the transaction.",
    ),
    "vkey_witness": TopicMeta(
        "Verification Key Witness",
        "A signature of the transaction body by a particular private key.",
    ),
    "vkey_witness_key": TopicMeta("Verification key"),
    "tx_redeemer": TopicMeta("Redeemer"),
    "tx_redeemer_tag": TopicMeta("Redeemer tag"),
    "tx_redeemer_data_json": TopicMeta("Redeemer data (JSON)"),
    "tx_datum": TopicMeta(
        "Transaction Datum",
        "Structured data attached to an output, used when a validation script executes.",
    ),
    "tx_datum_hash": TopicMeta(
        "Datum Hash",
        "Hash of the datum; outputs reference datums through it.",
    ),
    "tx_datum_json": TopicMeta(
        "Datum JSON",
        "A JSON view of the datum values. It is not the on-chain encoding.",
    ),
    "tx_reference_inputs": TopicMeta(
        "Reference Inputs",
        "Inputs read but not consumed by this transaction, letting it reuse scripts and "
        "values from existing UTxOs.",
    ),
    "tx_reference_input": TopicMeta("Reference Input"),
    "tx_mints": TopicMeta(
        "Transaction Mint",
        "Native tokens minted (or burned) by this transaction.",
    ),
    "tx_mint_policy": TopicMeta("Mint policy"),
    "tx_mint_policy_id": TopicMeta("Policy id"),
    "tx_mint_policy_assets": TopicMeta("Minted assets"),
    "tx_mint_policy_asset": TopicMeta("Minted asset"),
    "tx_mint_policy_asset_name": TopicMeta("Asset name (hex)"),
    "tx_mint_policy_asset_name_ascii": TopicMeta("Asset name (ascii)"),
    "tx_mint_policy_asset_coint": TopicMeta("Amount"),
}

BLOCK_TOPICS = {
    "cbor_parse": TX_TOPICS["cbor_parse"],
    "block": TopicMeta(
        "A valid Cardano Block",
        "Your CBOR data was successfully interpreted as a Cardano block.",
    ),
    "block_header": TopicMeta("Block header", "Era, slot and hash of the block."),
    "era": TopicMeta("Era"),
    "slot": TopicMeta("Slot"),
    "hash": TopicMeta("Block hash"),
    "block_body": TopicMeta("Block body", "The transactions included in the block, in order."),
    "block_tx": TopicMeta("Transaction"),
    "tx_hash": TX_TOPICS["tx_hash"],
}
