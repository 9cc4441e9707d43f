# cwc/core/session/wallet_session.py

import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

# Interfaces
from cwc.core.interfaces.i_wallet_provider import IWalletProvider, IEnabledWallet
from cwc.core.interfaces.i_serialization_engine import ISerializationEngine

# Modelos y Config
from cwc.core.models.transaction_request import Paginate
from cwc.core.config.protocol_constants import ProtocolConstants
from cwc.core.errors.wallet_errors import (
    SessionNotEnabledError,
    InvalidArgumentError,
    InsufficientBalanceError,
)
from cwc.core.utils.monetary import Monetary

logger = logging.getLogger(__name__)

class WalletSession:
    """
    Sesión explícita de billetera (propiedad del llamador, sin estado global).

    capability_handle: objeto crudo del proveedor (enable, is_enabled, experimental).
    enabled_handle: objeto devuelto por enable(); único canal para operaciones de ledger.

    Las operaciones CIP-30 se reenvían sin modificar el resultado ni re-envolver
    los errores del proveedor.
    """

    def __init__(self, engine: ISerializationEngine) -> None:
        self._engine = engine
        self._capability_handle: Optional[IWalletProvider] = None
        self._enabled_handle: Optional[IEnabledWallet] = None

    # --- Estado ---

    @property
    def wallet(self) -> Optional[IWalletProvider]:
        return self._capability_handle

    @property
    def capability_handle(self) -> Optional[IWalletProvider]:
        return self._capability_handle

    @property
    def enabled_handle(self) -> Optional[IEnabledWallet]:
        return self._enabled_handle

    @property
    def is_enabled(self) -> bool:
        return self._enabled_handle is not None

    def install(self, provider: IWalletProvider, enabled: IEnabledWallet) -> None:
        """Última escritura gana: una reconexión reemplaza ambos handles."""
        self._enabled_handle = enabled
        self._capability_handle = provider
        logger.debug(f"Sesión instalada para proveedor '{getattr(provider, 'name', '?')}'.")

    def clear(self) -> None:
        self._enabled_handle = None
        self._capability_handle = None

    def _require_enabled(self) -> IEnabledWallet:
        if self._enabled_handle is None:
            raise SessionNotEnabledError()
        return self._enabled_handle

    # --- Passthrough CIP-30 ---

    async def is_wallet_enabled(self) -> bool:
        """Consulta a nivel de capacidad (independiente del handle propio)."""
        if self._capability_handle is None:
            raise SessionNotEnabledError()
        return await self._capability_handle.is_enabled()

    async def get_balance(self) -> str:
        return await self._require_enabled().get_balance()

    async def get_network_id(self) -> int:
        return await self._require_enabled().get_network_id()

    async def get_utxos(self, amount: Optional[str] = None, paginate: Optional[Paginate] = None) -> List[str]:
        handle = self._require_enabled()
        raw_utxos = await handle.get_utxos(amount, paginate)
        logger.debug(f"getUtxos: {len(raw_utxos) if raw_utxos else 0} registros.")
        return raw_utxos

    async def get_collateral(self) -> List[str]:
        return await self._require_enabled().get_collateral()

    async def get_unused_addresses(self) -> List[str]:
        return await self._require_enabled().get_unused_addresses()

    async def get_change_address(self) -> str:
        change_address = await self._require_enabled().get_change_address()
        return self._engine.address_to_bech32(change_address)

    async def get_reward_addresses(self) -> List[str]:
        reward_addresses = await self._require_enabled().get_reward_addresses()
        return [self._engine.address_to_bech32(addr) for addr in reward_addresses]

    async def sign_tx(self, tx_hex: str, partial_sign: bool = False) -> str:
        return await self._require_enabled().sign_tx(tx_hex, partial_sign)

    async def submit_tx(self, tx_hex: str) -> str:
        return await self._require_enabled().submit_tx(tx_hex)

    # --- Operaciones Derivadas ---

    async def is_mainnet(self) -> bool:
        network_id = await self.get_network_id()
        return network_id == ProtocolConstants.MAINNET_NETWORK_ID

    async def get_ada_balance(self) -> Decimal:
        """Saldo en ADA (informativo). Exacto: Decimal, no float."""
        balance_hex = await self.get_balance()
        lovelace = self._engine.value_coin(balance_hex)
        return Monetary.to_ada(lovelace)

    async def verify_balance(self, minimum_amount: Union[int, Decimal, str]) -> None:
        """
        Verifica que el saldo (ADA) sea estrictamente mayor que el mínimo.

        Raises:
            InvalidArgumentError: minimum_amount no numérico, no finito o <= 0 (sin tocar la sesión).
            InsufficientBalanceError: saldo <= minimum_amount.
        """
        try:
            minimum = Decimal(str(minimum_amount))
        except InvalidOperation as e:
            raise InvalidArgumentError() from e

        if not minimum.is_finite() or minimum <= 0:
            raise InvalidArgumentError()

        ada_balance = await self.get_ada_balance()

        if ada_balance <= minimum:
            logger.info(f"Saldo insuficiente: {ada_balance} ADA <= {minimum} ADA")
            raise InsufficientBalanceError()

    async def get_utxo_bech32_addresses(self) -> List[str]:
        """Dirección bech32 del output de cada UTXO disponible."""
        raw_utxos = await self.get_utxos()
        return [self._engine.decode_unspent_output(raw).address for raw in raw_utxos]
