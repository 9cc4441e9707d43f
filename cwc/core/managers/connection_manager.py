# cwc/core/managers/connection_manager.py

import json
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

# Config / Enums
from cwc.core.config.protocol_constants import ProtocolConstants
from cwc.core.enums.wallet_key import WalletKey
from cwc.core.enums.connection_state import ConnectionState

# Interfaces y Modelos
from cwc.core.interfaces.i_key_value_storage import IKeyValueStorage
from cwc.core.interfaces.i_wallet_provider import IWalletProvider
from cwc.core.models.schemas import WalletDescriptor
from cwc.core.session.wallet_session import WalletSession

from cwc.core.errors.wallet_errors import (
    UnsupportedWalletError,
    HostEnvironmentUnavailableError,
    NoWalletsFoundError,
    SpecificWalletNotFoundError,
    StorageEntryMissingError,
)

logger = logging.getLogger(__name__)

# El "window" del host: None si no hay entorno de navegador
HostEnvironment = Optional[Mapping[str, Any]]

class ConnectionManager:
    """
    Máquina de estados de conexión:
        DISCONNECTED -> VALIDATING -> ENABLING -> CONNECTED
        CONNECTED -> DISCONNECTED (desconexión explícita)

    No hay lock: dos connect() concurrentes corren en paralelo y el último en
    terminar gana la asignación de la sesión.
    """

    def __init__(
        self,
        session: WalletSession,
        storage: IKeyValueStorage,
        window: HostEnvironment = None,
        storage_key: str = ProtocolConstants.STORAGE_KEY,
    ) -> None:
        self._session = session
        self._storage = storage
        self._window = window
        self._storage_key = storage_key
        self._state = ConnectionState.DISCONNECTED

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def supported_wallet_names(self):
        return WalletKey.supported()

    def attach_host(self, window: HostEnvironment) -> None:
        """Reemplaza el entorno host (p.ej. cuando la extensión se inyecta tarde)."""
        self._window = window

    # --- Validación ---

    def _validate_supported_wallet(self, wallet_key: str) -> None:
        if not WalletKey.is_supported(wallet_key):
            raise UnsupportedWalletError(wallet_key, WalletKey.supported())

    def validate_wallet(self, wallet_key: str) -> None:
        """
        Validación pura del host (usable como pre-flight).

        Raises:
            HostEnvironmentUnavailableError: no existe el objeto global del host.
            NoWalletsFoundError: el host no expone window.cardano.
            SpecificWalletNotFoundError: window.cardano no tiene la clave pedida.
        """
        if self._window is None:
            raise HostEnvironmentUnavailableError()

        namespace = self._window.get(ProtocolConstants.HOST_WALLET_NAMESPACE)
        if not namespace:
            raise NoWalletsFoundError()

        if not namespace.get(wallet_key):
            raise SpecificWalletNotFoundError(wallet_key)

    # --- Ciclo de Vida ---

    async def connect(self, wallet_key: str) -> IWalletProvider:
        """
        Habilita la billetera y la instala en la sesión.
        Los rechazos de enable() se propagan sin modificar.
        """
        wallet_key = str(wallet_key.value if isinstance(wallet_key, WalletKey) else wallet_key)
        previous_state = self._state

        try:
            self._state = ConnectionState.VALIDATING
            self._validate_supported_wallet(wallet_key)
            self.validate_wallet(wallet_key)

            wallet: IWalletProvider = self._window[ProtocolConstants.HOST_WALLET_NAMESPACE][wallet_key]  # type: ignore[index]

            self._state = ConnectionState.ENABLING
            logger.info(f"🔌 Solicitando enable() a '{wallet_key}'...")
            enabled = await wallet.enable()

        except Exception:
            # Ningún estado parcial queda visible
            self._state = previous_state if previous_state == ConnectionState.CONNECTED else ConnectionState.DISCONNECTED
            raise

        self._session.install(wallet, enabled)
        self._state = ConnectionState.CONNECTED
        self._set_wallet(wallet, wallet_key)

        logger.info(f"✅ Billetera '{wallet_key}' conectada.")
        return wallet

    def _set_wallet(self, wallet: IWalletProvider, wallet_key: str) -> None:
        """
        Persiste el descriptor SOLO si no hay uno guardado.
        La primera conexión exitosa gana; una segunda conexión con otra clave
        no sobrescribe la selección persistida.
        """
        if self.get_wallet_details_from_storage() is not None:
            logger.debug("Descriptor ya persistido. Se conserva el existente.")
            return

        descriptor = WalletDescriptor(
            name=getattr(wallet, "name", ""),
            icon=getattr(wallet, "icon", "") or "",
            api_version=getattr(wallet, "api_version", "") or "",
            key=wallet_key,
        )
        self._storage.set(self._storage_key, descriptor.to_json())
        logger.info(f"💾 Selección de billetera persistida: {wallet_key}")

    def disable_wallet(self) -> None:
        """
        Elimina el descriptor persistido.
        La sesión en memoria NO se limpia: el handle habilitado puede seguir vivo.
        """
        self._storage.remove(self._storage_key)
        self._state = ConnectionState.DISCONNECTED
        logger.info("🔌 Selección de billetera eliminada del almacenamiento.")

    # --- Restauración ---

    def get_wallet_details_from_storage(self) -> Optional[WalletDescriptor]:
        """Lectura pura: no re-habilita la billetera."""
        raw = self._storage.get(self._storage_key)
        if not raw:
            return None

        try:
            return WalletDescriptor.model_validate_json(raw)
        except ValidationError:
            logger.warning(f"Descriptor corrupto en '{self._storage_key}'. Se ignora.")
            return None

    def set_additional_wallet_data(self, data: Dict[str, str]) -> WalletDescriptor:
        """
        Fusiona campos adicionales en el descriptor persistido.
        Un descriptor corrupto o que no es un objeto JSON cuenta como ausente.
        """
        raw = self._storage.get(self._storage_key)
        if not raw:
            raise StorageEntryMissingError(self._storage_key)

        try:
            stored = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Descriptor corrupto en '{self._storage_key}'. No se puede fusionar.")
            raise StorageEntryMissingError(self._storage_key) from e

        if not isinstance(stored, dict):
            logger.warning(f"Descriptor en '{self._storage_key}' no es un objeto JSON. No se puede fusionar.")
            raise StorageEntryMissingError(self._storage_key)

        stored.update(data)

        updated = json.dumps(stored)
        self._storage.set(self._storage_key, updated)
        return WalletDescriptor.model_validate_json(updated)
