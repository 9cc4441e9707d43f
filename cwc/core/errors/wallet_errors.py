# cwc/core/errors/wallet_errors.py
'''
Taxonomía de errores del conector.

    Los mensajes son constantes estables (WalletError): la capa de aplicación
    ramifica sobre el tipo de excepción o sobre el mensaje, nunca sobre el
    detalle interno del proveedor, del motor de serialización o de HTTP.

    Classes::
        CardanoWalletError: Base de todos los errores del conector.
        UnsupportedWalletError, HostEnvironmentUnavailableError, NoWalletsFoundError,
        SpecificWalletNotFoundError: Descubrimiento y validación de billeteras.
        SessionNotEnabledError: Operación de ledger sin sesión habilitada.
        InvalidArgumentError, InsufficientBalanceError: Verificación de saldo.
        NotDelegatedError: Verificación de staking.
        TransactionBuildError: Fallo del motor al construir (envuelve la causa).
        ExternalApiError (+ Blockfrost*Error): Fallos del indexador remoto.
        ConfigurationError: Falta configuración de despliegue.
        StorageEntryMissingError: No hay descriptor persistido.
'''

from typing import Iterable, Optional

class WalletError:
    """Mensajes fijos expuestos a la aplicación."""
    MINIMUM_BALANCE_IS_ZERO = "Minimum balance must be greater than 0."
    INSUFFICIENT_BALANCE = "Insufficient balance"
    WINDOW_NOT_DEFINED = "window is not defined"
    NO_WALLETS_FOUND = "No wallets found"
    SPECIFIC_WALLET_NOT_FOUND = "Specific wallet not found"
    SESSION_NOT_ENABLED = "Wallet is not enabled. Call connect() first."
    NOT_DELEGATED = "Not delegated"
    TRANSACTION_BUILD_FAILED = "Error building transaction"
    BLOCKFROST_GET_REWARDS_HISTORY_ERROR = "Error getting rewards history"
    BLOCKFROST_GET_REGISTRATIONS_ERROR = "Error getting registrations"
    BLOCKFROST_URL_NOT_DEFINED = "Blockfrost URL not defined"
    BLOCKFROST_PROJECT_ID_NOT_DEFINED = "Blockfrost project ID not defined"
    LEDGER_INDEX_NOT_DEFINED = "Ledger index not defined"

    @staticmethod
    def unsupported_wallet(wallet_key: str, supported: Iterable[str]) -> str:
        return f"{wallet_key} is not supported. Only {', '.join(supported)} are supported."

    @staticmethod
    def storage_entry_missing(storage_key: str) -> str:
        return f"No data saved to local storage. Missing {storage_key}"


class CardanoWalletError(Exception):
    """Excepción base del conector."""
    pass

# --- Descubrimiento / Conexión ---

class UnsupportedWalletError(CardanoWalletError):
    def __init__(self, wallet_key: str, supported: Iterable[str]) -> None:
        self.wallet_key = wallet_key
        self.supported = list(supported)
        super().__init__(WalletError.unsupported_wallet(wallet_key, self.supported))

class HostEnvironmentUnavailableError(CardanoWalletError):
    def __init__(self) -> None:
        super().__init__(WalletError.WINDOW_NOT_DEFINED)

class NoWalletsFoundError(CardanoWalletError):
    def __init__(self) -> None:
        super().__init__(WalletError.NO_WALLETS_FOUND)

class SpecificWalletNotFoundError(CardanoWalletError):
    def __init__(self, wallet_key: Optional[str] = None) -> None:
        self.wallet_key = wallet_key
        super().__init__(WalletError.SPECIFIC_WALLET_NOT_FOUND)

# --- Sesión ---

class SessionNotEnabledError(CardanoWalletError):
    def __init__(self) -> None:
        super().__init__(WalletError.SESSION_NOT_ENABLED)

# --- Saldo ---

class InvalidArgumentError(CardanoWalletError, ValueError):
    def __init__(self, message: str = WalletError.MINIMUM_BALANCE_IS_ZERO) -> None:
        super().__init__(message)

class InsufficientBalanceError(CardanoWalletError):
    def __init__(self) -> None:
        super().__init__(WalletError.INSUFFICIENT_BALANCE)

# --- Staking ---

class NotDelegatedError(CardanoWalletError):
    def __init__(self) -> None:
        super().__init__(WalletError.NOT_DELEGATED)

# --- Construcción ---

class TransactionBuildError(CardanoWalletError):
    """Envuelve cualquier fallo del motor. El mensaje es fijo; la causa queda en __cause__ y en .cause."""
    def __init__(self, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(WalletError.TRANSACTION_BUILD_FAILED)

# --- Indexador Remoto ---

class ExternalApiError(CardanoWalletError):
    pass

class BlockfrostGetRegistrationsError(ExternalApiError):
    def __init__(self) -> None:
        super().__init__(WalletError.BLOCKFROST_GET_REGISTRATIONS_ERROR)

class BlockfrostGetRewardsHistoryError(ExternalApiError):
    def __init__(self) -> None:
        super().__init__(WalletError.BLOCKFROST_GET_REWARDS_HISTORY_ERROR)

# --- Configuración / Persistencia ---

class ConfigurationError(CardanoWalletError):
    pass

class StorageEntryMissingError(CardanoWalletError):
    def __init__(self, storage_key: str) -> None:
        self.storage_key = storage_key
        super().__init__(WalletError.storage_entry_missing(storage_key))
