# cwc/core/services/signing_pipeline.py

import logging

from cwc.core.interfaces.i_serialization_engine import ISerializationEngine
from cwc.core.session.wallet_session import WalletSession

logger = logging.getLogger(__name__)

class SigningPipeline:
    """
    firma parcial -> fusión de testigos -> envío (en ese orden).
    Si la firma falla, nunca se intenta el envío.
    """

    def __init__(self, session: WalletSession, engine: ISerializationEngine) -> None:
        self._session = session
        self._engine = engine

    async def sign_transaction(self, tx_hex: str) -> str:
        """
        Pide a la billetera una firma parcial y re-ensambla la transacción
        con un set de testigos nuevo que solo contiene los vkeys devueltos.
        Scripts y demás categorías de testigos se descartan.
        """
        partial_witnesses_hex = await self._session.sign_tx(tx_hex, True)

        partial_witness_set = self._engine.decode_witness_set(partial_witnesses_hex)
        witness_set = self._engine.witness_set_with_vkeys(self._engine.vkey_witnesses(partial_witness_set))

        body = self._engine.transaction_body(tx_hex)
        signed_tx_hex = self._engine.encode_transaction(body, witness_set)

        logger.info("Wallet: Testigos fusionados. Transacción firmada.")
        return signed_tx_hex

    async def submit_signed_transaction(self, signed_tx_hex: str) -> str:
        tx_id = await self._session.submit_tx(signed_tx_hex)
        logger.info(f"📤 TX enviada: {str(tx_id)[:8]}...")
        return tx_id

    async def sign_and_submit_transaction(self, tx_hex: str) -> str:
        signed_tx_hex = await self.sign_transaction(tx_hex)
        return await self.submit_signed_transaction(signed_tx_hex)
