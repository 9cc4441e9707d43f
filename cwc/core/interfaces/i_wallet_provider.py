# cwc/core/interfaces/i_wallet_provider.py

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from cwc.core.models.transaction_request import Paginate

class IEnabledWallet(ABC):
    """
    [Capacidades CIP-30]
    Handle devuelto por enable(). Es el único canal por el que se permiten
    operaciones de ledger. Todos los valores binarios viajan como hex (CBOR).
    """

    @abstractmethod
    async def get_balance(self) -> str:
        """Value CBOR en hex."""
        pass

    @abstractmethod
    async def get_network_id(self) -> int:
        """0 = testnet, 1 = mainnet."""
        pass

    @abstractmethod
    async def get_utxos(self, amount: Optional[str] = None, paginate: Optional[Paginate] = None) -> List[str]:
        pass

    @abstractmethod
    async def get_collateral(self) -> List[str]:
        pass

    @abstractmethod
    async def get_unused_addresses(self) -> List[str]:
        pass

    @abstractmethod
    async def get_change_address(self) -> str:
        pass

    @abstractmethod
    async def get_reward_addresses(self) -> List[str]:
        pass

    @abstractmethod
    async def sign_tx(self, tx_hex: str, partial_sign: bool = False) -> str:
        """Devuelve un TransactionWitnessSet CBOR en hex."""
        pass

    @abstractmethod
    async def submit_tx(self, tx_hex: str) -> str:
        """Devuelve el id de la transacción enviada."""
        pass


class IWalletProvider(ABC):
    """
    [Contrato Polimórfico del Proveedor]
    Objeto inyectado por la extensión del navegador en window.cardano[<key>].
    Las diferencias entre proveedores se limitan al mapa 'experimental'.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def icon(self) -> str:
        pass

    @property
    @abstractmethod
    def api_version(self) -> str:
        pass

    @property
    def experimental(self) -> Mapping[str, Any]:
        return {}

    @abstractmethod
    async def enable(self) -> IEnabledWallet:
        """Solicita permiso al usuario y devuelve el handle habilitado."""
        pass

    @abstractmethod
    async def is_enabled(self) -> bool:
        pass
