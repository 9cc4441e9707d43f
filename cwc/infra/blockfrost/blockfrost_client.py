# cwc/infra/blockfrost/blockfrost_client.py
"""
Cliente asíncrono del indexador Blockfrost (endpoints /accounts).

Cualquier respuesta no-2xx, error de transporte o cuerpo inválido se traduce
a un error fijo del conector (sin filtrar el detalle del proveedor HTTP).
No hay reintentos.
"""

import logging
from typing import List, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from cwc.core.config.blockfrost_config import BlockfrostConfig
from cwc.core.config.config_manager import ConfigManager
from cwc.core.config.protocol_constants import ProtocolConstants
from cwc.core.interfaces.i_ledger_index import ILedgerIndex
from cwc.core.models.schemas import StakeRegistrationRecord, AccountHistoryRecord
from cwc.core.errors.wallet_errors import (
    WalletError,
    ConfigurationError,
    ExternalApiError,
    BlockfrostGetRegistrationsError,
    BlockfrostGetRewardsHistoryError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

class BlockfrostClient(ILedgerIndex):

    def __init__(
        self,
        config: Optional[BlockfrostConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            config: URL, project id y timeout. Por defecto, ConfigManager().blockfrost.
            transport: Transporte httpx alternativo (tests con httpx.MockTransport).
        """
        self._config = config or ConfigManager().blockfrost
        self._transport = transport

    def _accounts_url(self, stake_address: str, resource: str) -> str:
        if not self._config.base_url:
            raise ConfigurationError(WalletError.BLOCKFROST_URL_NOT_DEFINED)
        if not self._config.project_id:
            raise ConfigurationError(WalletError.BLOCKFROST_PROJECT_ID_NOT_DEFINED)

        return f"{self._config.base_url}/api/{self._config.api_version}/accounts/{stake_address}/{resource}"

    async def _get_list(
        self,
        url: str,
        model: Type[T],
        error_cls: Type[ExternalApiError],
    ) -> List[T]:
        headers = {
            ProtocolConstants.BLOCKFROST_AUTH_HEADER: self._config.project_id,
            "User-Agent": ProtocolConstants.USER_AGENT,
        }

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout_sec, transport=self._transport) as client:
                response = await client.get(url, params={"order": "desc"}, headers=headers)
                logger.debug(f"GET {url} - Status: {response.status_code}")
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Blockfrost respondió {e.response.status_code} para {url}")
            raise error_cls() from e
        except httpx.HTTPError as e:
            logger.error(f"Error de red con Blockfrost: {e}")
            raise error_cls() from e
        except ValueError as e:
            logger.error(f"Respuesta de Blockfrost no es JSON válido: {e}")
            raise error_cls() from e

        try:
            return TypeAdapter(List[model]).validate_python(payload)  # type: ignore[valid-type]
        except ValidationError as e:
            logger.error(f"Respuesta de Blockfrost con formato inesperado: {e}")
            raise error_cls() from e

    async def get_accounts_registrations(self, stake_address: str) -> List[StakeRegistrationRecord]:
        url = self._accounts_url(stake_address, "registrations")
        return await self._get_list(url, StakeRegistrationRecord, BlockfrostGetRegistrationsError)

    async def get_accounts_history(self, stake_address: str) -> List[AccountHistoryRecord]:
        url = self._accounts_url(stake_address, "history")
        return await self._get_list(url, AccountHistoryRecord, BlockfrostGetRewardsHistoryError)
