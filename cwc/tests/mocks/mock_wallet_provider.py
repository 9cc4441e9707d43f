# cwc/tests/mocks/mock_wallet_provider.py
'''
class MockWalletProvider / MockEnabledWallet:
    Simulan una extensión CIP-30 inyectada en window.cardano sin navegador.

    Methods::
        enable() -> MockEnabledWallet: Devuelve el handle habilitado (o lanza enable_error).
        is_enabled() -> bool: Valor fijo configurable.
        MockEnabledWallet.*: Devuelven valores fijos y registran cada llamada en 'calls'.
'''

from typing import Any, Dict, List, Mapping, Optional, Tuple

from cwc.core.interfaces.i_wallet_provider import IWalletProvider, IEnabledWallet
from cwc.core.models.transaction_request import Paginate

class MockEnabledWallet(IEnabledWallet):

    MOCK_TX_ID: str = "f" * 64

    def __init__(
        self,
        balance_hex: str = "4c4b40",
        network_id: int = 1,
        utxos: Optional[List[str]] = None,
        change_address_hex: str = "00aa",
        reward_addresses_hex: Optional[List[str]] = None,
        witness_set_hex: str = "",
        sign_error: Optional[Exception] = None,
        submit_error: Optional[Exception] = None,
    ) -> None:
        self.balance_hex = balance_hex
        self.network_id = network_id
        self.utxos = utxos if utxos is not None else []
        self.change_address_hex = change_address_hex
        self.reward_addresses_hex = reward_addresses_hex if reward_addresses_hex is not None else ["e0bb"]
        self.witness_set_hex = witness_set_hex
        self.sign_error = sign_error
        self.submit_error = submit_error
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    async def get_balance(self) -> str:
        self.calls.append(("get_balance", ()))
        return self.balance_hex

    async def get_network_id(self) -> int:
        self.calls.append(("get_network_id", ()))
        return self.network_id

    async def get_utxos(self, amount: Optional[str] = None, paginate: Optional[Paginate] = None) -> List[str]:
        self.calls.append(("get_utxos", (amount, paginate)))
        return list(self.utxos)

    async def get_collateral(self) -> List[str]:
        self.calls.append(("get_collateral", ()))
        return self.utxos[:1]

    async def get_unused_addresses(self) -> List[str]:
        self.calls.append(("get_unused_addresses", ()))
        return ["00cc"]

    async def get_change_address(self) -> str:
        self.calls.append(("get_change_address", ()))
        return self.change_address_hex

    async def get_reward_addresses(self) -> List[str]:
        self.calls.append(("get_reward_addresses", ()))
        return list(self.reward_addresses_hex)

    async def sign_tx(self, tx_hex: str, partial_sign: bool = False) -> str:
        self.calls.append(("sign_tx", (tx_hex, partial_sign)))
        if self.sign_error:
            raise self.sign_error
        return self.witness_set_hex

    async def submit_tx(self, tx_hex: str) -> str:
        self.calls.append(("submit_tx", (tx_hex,)))
        if self.submit_error:
            raise self.submit_error
        return self.MOCK_TX_ID

    def called(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)


class MockWalletProvider(IWalletProvider):

    def __init__(
        self,
        name: str = "Nami",
        icon: str = "x.jpg",
        api_version: str = "0.1.0",
        enabled_wallet: Optional[MockEnabledWallet] = None,
        enable_error: Optional[Exception] = None,
        enabled: bool = True,
        experimental: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._name = name
        self._icon = icon
        self._api_version = api_version
        self.enabled_wallet = enabled_wallet if enabled_wallet is not None else MockEnabledWallet()
        self.enable_error = enable_error
        self._enabled = enabled
        self._experimental = experimental or {}
        self.enable_calls = 0

    @property
    def name(self) -> str: return self._name
    @property
    def icon(self) -> str: return self._icon
    @property
    def api_version(self) -> str: return self._api_version
    @property
    def experimental(self) -> Mapping[str, Any]: return self._experimental

    async def enable(self) -> MockEnabledWallet:
        self.enable_calls += 1
        if self.enable_error:
            raise self.enable_error
        return self.enabled_wallet

    async def is_enabled(self) -> bool:
        return self._enabled
