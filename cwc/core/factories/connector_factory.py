# cwc/core/factories/connector_factory.py

import logging
from typing import Optional

# Configuración
from cwc.core.config.config_manager import ConfigManager

# Interfaces
from cwc.core.interfaces.i_key_value_storage import IKeyValueStorage
from cwc.core.interfaces.i_ledger_index import ILedgerIndex
from cwc.core.interfaces.i_serialization_engine import ISerializationEngine

# Infraestructura
from cwc.infra.persistence.storage_factory import StorageFactory
from cwc.infra.blockfrost.blockfrost_client import BlockfrostClient

# Fachada
from cwc.core.managers.cardano_wallets import CardanoWallets
from cwc.core.managers.connection_manager import HostEnvironment

logger = logging.getLogger(__name__)

class ConnectorFactory:
    """
    Fábrica Central del Conector.
    Encapsula el grafo de dependencias (configuración, almacenamiento,
    indexador y motor) detrás de una única llamada.
    """

    @staticmethod
    def create(
        window: HostEnvironment,
        engine: ISerializationEngine,
        storage: Optional[IKeyValueStorage] = None,
        ledger_index: Optional[ILedgerIndex] = None,
    ) -> CardanoWallets:
        try:
            logger.info("🏭 ConnectorFactory: Ensamblando conector de billeteras...")
            config = ConfigManager()

            storage = storage if storage is not None else StorageFactory.create(config.persistence)
            ledger_index = ledger_index if ledger_index is not None else BlockfrostClient(config.blockfrost)

            connector = CardanoWallets(
                engine=engine,
                storage=storage,
                window=window,
                ledger_index=ledger_index,
                protocol_params=config.protocol_params,
            )
            logger.info(f"Conector ensamblado. Parámetros: {config.protocol_params!r}")
            return connector

        except Exception:
            logger.exception("Fallo al ensamblar el conector")
            raise
