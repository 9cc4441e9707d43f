# cwc/core/services/staking_verifier.py

import logging
from typing import List

from cwc.core.interfaces.i_ledger_index import ILedgerIndex
from cwc.core.models.schemas import AccountHistoryRecord
from cwc.core.errors.wallet_errors import ExternalApiError, NotDelegatedError

logger = logging.getLogger(__name__)

class StakingVerifier:

    def __init__(self, ledger_index: ILedgerIndex) -> None:
        self._ledger_index = ledger_index

    async def verify_staking(self, reward_address: str) -> None:
        """
        Verifica que la dirección de recompensas tenga un registro de stake.

        Solo se comprueba la PRESENCIA del registro más reciente, no su acción:
        un 'deregistered' como último registro sigue contando como delegado.

        Raises:
            NotDelegatedError: la consulta falla, no devuelve datos o está vacía.
            ConfigurationError: falta URL o project id del indexador. Se propaga
                sin convertirse en NotDelegatedError: es un error de despliegue,
                no un fallo de la consulta.
        """
        try:
            registrations = await self._ledger_index.get_accounts_registrations(reward_address)
        except ExternalApiError as e:
            logger.warning(f"Consulta de registros fallida para {reward_address[:12]}...: {e}")
            raise NotDelegatedError() from e

        if not registrations:
            raise NotDelegatedError()

        current_registration = registrations[0]
        if current_registration is None:
            raise NotDelegatedError()

        logger.debug(f"Registro vigente: {current_registration.action} ({current_registration.tx_hash[:8]}...)")

    async def get_delegation_history(self, reward_address: str) -> List[AccountHistoryRecord]:
        """Historial de delegación (más reciente primero)."""
        return await self._ledger_index.get_accounts_history(reward_address)
