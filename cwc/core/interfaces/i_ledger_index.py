# cwc/core/interfaces/i_ledger_index.py

from abc import ABC, abstractmethod
from typing import List

from cwc.core.models.schemas import StakeRegistrationRecord, AccountHistoryRecord

class ILedgerIndex(ABC):
    """
    Contrato para el indexador remoto del ledger (solo lectura).
    Ambas consultas devuelven los registros del más reciente al más antiguo.
    """

    @abstractmethod
    async def get_accounts_registrations(self, stake_address: str) -> List[StakeRegistrationRecord]:
        """Raises: BlockfrostGetRegistrationsError"""
        pass

    @abstractmethod
    async def get_accounts_history(self, stake_address: str) -> List[AccountHistoryRecord]:
        """Raises: BlockfrostGetRewardsHistoryError"""
        pass
