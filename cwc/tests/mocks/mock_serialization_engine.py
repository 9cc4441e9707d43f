# cwc/tests/mocks/mock_serialization_engine.py
'''
class MockSerializationEngine:
    Motor de serialización determinista para tests (sin CBOR real).
    Las estructuras viajan como JSON codificado en hex.

    Methods::
        register_utxo(record) -> str: Registra un UnspentOutputRecord y devuelve su "hex".
        encode_json_hex(obj) -> str: Helper para fabricar testigos/transacciones.
'''

import hashlib
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from cwc.core.config.protocol_params import ProtocolParams
from cwc.core.interfaces.i_serialization_engine import ISerializationEngine, ITransactionBuilder
from cwc.core.models.utxo import UnspentOutputRecord

# Tamaño ficticio usado en la fórmula lineal de fee
MOCK_TX_SIZE: int = 300
MOCK_MIN_CHANGE: int = 1_000_000


def encode_json_hex(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True).encode("utf-8").hex()


def decode_json_hex(data_hex: str) -> Any:
    return json.loads(bytes.fromhex(data_hex).decode("utf-8"))


class MockTransactionBuilder(ITransactionBuilder):

    def __init__(self, engine: "MockSerializationEngine", params: ProtocolParams) -> None:
        self._engine = engine
        self.params = params
        self.outputs: List[Tuple[str, int]] = []
        self.inputs: List[str] = []
        self.strategy: Optional[int] = None
        self.fee: int = params.min_fee_a * MOCK_TX_SIZE + params.min_fee_b

    def add_output(self, address_bech32: str, lovelace: int) -> None:
        if not address_bech32.startswith("addr"):
            raise ValueError(f"Invalid bech32 address: {address_bech32}")
        self.outputs.append((address_bech32, lovelace))

    def add_inputs_from(self, utxo_hexes: Sequence[str], strategy: int) -> None:
        self.strategy = strategy
        self.inputs = list(utxo_hexes)

    def add_change_if_needed(self, change_address_bech32: str) -> bool:
        total_in = sum(self._engine.decode_unspent_output(u).coin for u in self.inputs)
        total_out = sum(amount for _, amount in self.outputs)

        if total_in < total_out + self.fee:
            raise ValueError("Insufficient input in transaction")

        residual = total_in - total_out - self.fee
        if residual >= MOCK_MIN_CHANGE:
            self.add_output(change_address_bech32, residual)
            return True

        self.fee += residual
        return False

    def build(self) -> Dict[str, Any]:
        return {
            "inputs": list(self.inputs),
            "outputs": [[addr, amount] for addr, amount in self.outputs],
            "fee": self.fee,
        }


class MockSerializationEngine(ISerializationEngine):

    def __init__(self) -> None:
        self._utxos: Dict[str, UnspentOutputRecord] = {}
        self.builders: List[MockTransactionBuilder] = []

    def register_utxo(self, record: UnspentOutputRecord) -> str:
        utxo_hex = encode_json_hex({"tx": record.tx_id.hex(), "ix": record.index})
        self._utxos[utxo_hex] = record
        return utxo_hex

    # --- Decodificación ---

    def decode_unspent_output(self, utxo_hex: str) -> UnspentOutputRecord:
        if utxo_hex not in self._utxos:
            raise ValueError(f"Deserialization failed: {utxo_hex[:16]}")
        return self._utxos[utxo_hex]

    def address_to_bech32(self, address_hex: str) -> str:
        prefix = "stake1" if address_hex.startswith("e") else "addr1"
        return f"{prefix}{address_hex}"

    def value_coin(self, value_hex: str) -> str:
        return str(int(value_hex, 16))

    # --- Construcción ---

    def new_transaction_builder(self, params: ProtocolParams) -> MockTransactionBuilder:
        builder = MockTransactionBuilder(self, params)
        self.builders.append(builder)
        return builder

    def hash_transaction(self, body: Any) -> str:
        return hashlib.sha256(json.dumps(body, sort_keys=True).encode("utf-8")).hexdigest()

    def encode_transaction(self, body: Any, witness_set: Any) -> str:
        return encode_json_hex({"body": body, "witness_set": witness_set})

    def transaction_body(self, tx_hex: str) -> Any:
        return decode_json_hex(tx_hex)["body"]

    # --- Testigos ---

    def empty_witness_set(self) -> Dict[str, Any]:
        return {}

    def decode_witness_set(self, witness_set_hex: str) -> Dict[str, Any]:
        return decode_json_hex(witness_set_hex)

    def vkey_witnesses(self, witness_set: Any) -> Any:
        return witness_set.get("vkeys")

    def witness_set_with_vkeys(self, vkeys: Any) -> Dict[str, Any]:
        return {"vkeys": vkeys}
