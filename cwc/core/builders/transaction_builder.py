# cwc/core/builders/transaction_builder.py

import logging
from typing import Optional

# Config
from cwc.core.config.config_manager import ConfigManager
from cwc.core.config.protocol_constants import ProtocolConstants
from cwc.core.config.protocol_params import ProtocolParams

# Interfaces y Modelos
from cwc.core.interfaces.i_serialization_engine import ISerializationEngine
from cwc.core.models.transaction_request import BuiltTransaction, ChangeOutputSpec, OutputSpec
from cwc.core.session.wallet_session import WalletSession
from cwc.core.errors.wallet_errors import TransactionBuildError

logger = logging.getLogger(__name__)

class TransactionBuilder:
    """
    Construye una transacción sin firmar a partir de:
        1. Output de pago obligatorio.
        2. Output de comisión (split) opcional.
        3. Todos los UTXOs de la sesión como pool de inputs (estrategia 0).
        4. Cambio calculado por el motor.

    No hace selección de monedas propia ni pre-chequea fondos: un pool vacío
    falla dentro del motor y se reporta como TransactionBuildError.
    """

    def __init__(
        self,
        session: WalletSession,
        engine: ISerializationEngine,
        protocol_params: Optional[ProtocolParams] = None,
    ) -> None:
        self._session = session
        self._engine = engine
        self._params = protocol_params if protocol_params is not None else ConfigManager().protocol_params

    @property
    def protocol_params(self) -> ProtocolParams:
        return self._params

    async def build_transaction(
        self,
        payment_details: ChangeOutputSpec,
        fee_details: Optional[OutputSpec] = None,
    ) -> BuiltTransaction:
        try:
            # 1. Builder contra el perfil de protocolo
            tx_builder = self._engine.new_transaction_builder(self._params)

            # 2. Output de pago
            tx_builder.add_output(payment_details.address, payment_details.lovelace)

            # 3. Output de comisión
            if fee_details:
                tx_builder.add_output(fee_details.address, fee_details.lovelace)

            # 4. Pool de inputs: todos los UTXOs, sin filtro ni paginación
            raw_utxos = await self._session.get_utxos()
            logger.info(f"Builder: {len(raw_utxos or [])} UTXOs candidatos como inputs.")
            tx_builder.add_inputs_from(list(raw_utxos or []), ProtocolConstants.INPUT_SELECTION_STRATEGY)

            # 5. Cambio (o residuo absorbido en la comisión)
            change_added = tx_builder.add_change_if_needed(payment_details.change_address)
            logger.debug(f"Builder: output de cambio {'agregado' if change_added else 'no necesario'}.")

            # 6. Body + hash + set de testigos vacío
            body = tx_builder.build()
            tx_hash = self._engine.hash_transaction(body)
            tx_hex = self._engine.encode_transaction(body, self._engine.empty_witness_set())

        except Exception as e:
            logger.exception("Fallo en la construcción de la transacción")
            raise TransactionBuildError(e) from e

        logger.info(f"Builder: TX {tx_hash[:8]}... construida (sin firmar).")
        return BuiltTransaction(tx_hash=tx_hash, tx=tx_hex)
