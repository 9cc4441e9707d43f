# cwc/core/services/asset_inventory_decoder.py

import logging
from typing import Iterable, List, Mapping, Optional

from cwc.core.interfaces.i_serialization_engine import ISerializationEngine
from cwc.core.models.utxo import Asset, Utxo, UnspentOutputRecord, asset_name_from_bytes

logger = logging.getLogger(__name__)

class AssetInventoryDecoder:
    """
    Convierte UTXOs hex (CBOR opaco) en un inventario estructurado.

    Determinista y sin estado entre llamadas: cada decode() es independiente.
    Orden preservado: registros en el orden de entrada, políticas y nombres
    de activo en el orden nativo del bundle.
    """

    def __init__(self, engine: ISerializationEngine) -> None:
        self._engine = engine

    def decode(self, raw_utxos: Iterable[str]) -> List[Utxo]:
        utxos: List[Utxo] = []

        for raw_utxo in raw_utxos:
            record = self._engine.decode_unspent_output(raw_utxo)
            utxos.append(self.decode_record(record))

        logger.debug(f"Inventario decodificado: {len(utxos)} UTXOs.")
        return utxos

    @staticmethod
    def decode_record(record: UnspentOutputRecord) -> Utxo:
        return Utxo(
            tx_id=record.tx_id.hex(),
            tx_index=int(record.index),
            # str(int) nunca pasa por float
            lovelace_amount=str(int(record.coin)),
            assets=tuple(AssetInventoryDecoder._flatten_multiasset(record.multiasset)),
        )

    @staticmethod
    def _flatten_multiasset(multiasset: Optional[Mapping[bytes, Mapping[bytes, int]]]) -> List[Asset]:
        all_assets: List[Asset] = []
        if not multiasset:
            return all_assets

        for policy, assets in multiasset.items():
            policy_hex = policy.hex()

            for asset_name in assets.keys():
                all_assets.append(Asset(
                    policy_id=policy_hex,
                    name_hex=asset_name.hex(),
                    asset_name=asset_name_from_bytes(asset_name),
                ))

        return all_assets
