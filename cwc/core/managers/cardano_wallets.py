# cwc/core/managers/cardano_wallets.py

import logging
from decimal import Decimal
from typing import Dict, List, Optional, Union

# Interfaces
from cwc.core.interfaces.i_key_value_storage import IKeyValueStorage
from cwc.core.interfaces.i_ledger_index import ILedgerIndex
from cwc.core.interfaces.i_serialization_engine import ISerializationEngine
from cwc.core.interfaces.i_wallet_provider import IWalletProvider

# Componentes
from cwc.core.session.wallet_session import WalletSession
from cwc.core.managers.connection_manager import ConnectionManager, HostEnvironment
from cwc.core.services.asset_inventory_decoder import AssetInventoryDecoder
from cwc.core.builders.transaction_builder import TransactionBuilder
from cwc.core.services.signing_pipeline import SigningPipeline
from cwc.core.services.staking_verifier import StakingVerifier

# Modelos
from cwc.core.config.protocol_params import ProtocolParams
from cwc.core.models.schemas import WalletDescriptor, AccountHistoryRecord
from cwc.core.models.transaction_request import (
    BuildTransactionInput,
    BuiltTransaction,
    ChangeOutputSpec,
    OutputSpec,
    Paginate,
)
from cwc.core.models.utxo import Utxo
from cwc.core.errors.wallet_errors import ConfigurationError, WalletError

logger = logging.getLogger(__name__)

class CardanoWallets:
    """
    Fachada del conector. Cada instancia posee su propia WalletSession;
    no existe estado global compartido entre instancias.

    Flujo típico:
        wallets = ConnectorFactory.create(window, engine)
        await wallets.connect("nami")
        built = await wallets.build_transaction(BuildTransactionInput(...))
        tx_id = await wallets.sign_and_submit_transaction(built.tx)
    """

    def __init__(
        self,
        engine: ISerializationEngine,
        storage: IKeyValueStorage,
        window: HostEnvironment = None,
        ledger_index: Optional[ILedgerIndex] = None,
        protocol_params: Optional[ProtocolParams] = None,
    ) -> None:
        self._session = WalletSession(engine)
        self._connection = ConnectionManager(self._session, storage, window)
        self._decoder = AssetInventoryDecoder(engine)
        self._builder = TransactionBuilder(self._session, engine, protocol_params)
        self._pipeline = SigningPipeline(self._session, engine)
        self._staking = StakingVerifier(ledger_index) if ledger_index is not None else None

    # --- Componentes (solo lectura) ---

    @property
    def session(self) -> WalletSession:
        return self._session

    @property
    def connection(self) -> ConnectionManager:
        return self._connection

    @property
    def wallet(self) -> Optional[IWalletProvider]:
        return self._session.wallet

    # --- Conexión ---

    async def connect(self, wallet_key: str) -> IWalletProvider:
        return await self._connection.connect(wallet_key)

    def validate_wallet(self, wallet_key: str) -> None:
        self._connection.validate_wallet(wallet_key)

    def disable_wallet(self) -> None:
        self._connection.disable_wallet()

    def get_wallet_details_from_storage(self) -> Optional[WalletDescriptor]:
        return self._connection.get_wallet_details_from_storage()

    def set_additional_wallet_data(self, data: Dict[str, str]) -> WalletDescriptor:
        return self._connection.set_additional_wallet_data(data)

    # --- CIP-30 ---

    async def is_wallet_enabled(self) -> bool:
        return await self._session.is_wallet_enabled()

    async def get_balance(self) -> str:
        return await self._session.get_balance()

    async def get_network_id(self) -> int:
        return await self._session.get_network_id()

    async def get_utxos(self, amount: Optional[str] = None, paginate: Optional[Paginate] = None) -> List[str]:
        return await self._session.get_utxos(amount, paginate)

    async def get_collateral(self) -> List[str]:
        return await self._session.get_collateral()

    async def get_unused_addresses(self) -> List[str]:
        return await self._session.get_unused_addresses()

    async def get_change_address(self) -> str:
        return await self._session.get_change_address()

    async def get_reward_addresses(self) -> List[str]:
        return await self._session.get_reward_addresses()

    async def sign_tx(self, tx_hex: str, partial_sign: bool = False) -> str:
        return await self._session.sign_tx(tx_hex, partial_sign)

    async def submit_tx(self, tx_hex: str) -> str:
        return await self._session.submit_tx(tx_hex)

    # --- Derivadas ---

    async def is_mainnet(self) -> bool:
        return await self._session.is_mainnet()

    async def get_ada_balance(self) -> Decimal:
        return await self._session.get_ada_balance()

    async def verify_balance(self, minimum_amount: Union[int, Decimal, str]) -> None:
        await self._session.verify_balance(minimum_amount)

    async def get_utxo_bech32_addresses(self) -> List[str]:
        return await self._session.get_utxo_bech32_addresses()

    # --- Inventario ---

    def build_utxos(self, raw_utxos: List[str]) -> List[Utxo]:
        return self._decoder.decode(raw_utxos)

    async def get_utxo_inventory(self) -> List[Utxo]:
        """Atajo: getUtxos() + decodificación."""
        return self._decoder.decode(await self._session.get_utxos() or [])

    # --- Transacciones ---

    async def build_transaction(
        self,
        request: Union[BuildTransactionInput, ChangeOutputSpec],
        fee_details: Optional[OutputSpec] = None,
    ) -> BuiltTransaction:
        if isinstance(request, BuildTransactionInput):
            return await self._builder.build_transaction(request.payment_details, request.fee_details)
        return await self._builder.build_transaction(request, fee_details)

    async def sign_transaction(self, tx_hex: str) -> str:
        return await self._pipeline.sign_transaction(tx_hex)

    async def submit_signed_transaction(self, signed_tx_hex: str) -> str:
        return await self._pipeline.submit_signed_transaction(signed_tx_hex)

    async def sign_and_submit_transaction(self, tx_hex: str) -> str:
        return await self._pipeline.sign_and_submit_transaction(tx_hex)

    # --- Staking ---

    def _require_staking(self) -> StakingVerifier:
        if self._staking is None:
            raise ConfigurationError(WalletError.LEDGER_INDEX_NOT_DEFINED)
        return self._staking

    async def verify_staking(self, reward_address: str) -> None:
        await self._require_staking().verify_staking(reward_address)

    async def get_delegation_history(self, reward_address: str) -> List[AccountHistoryRecord]:
        return await self._require_staking().get_delegation_history(reward_address)
