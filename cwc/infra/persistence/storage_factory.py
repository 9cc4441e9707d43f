# cwc/infra/persistence/storage_factory.py

import logging
from typing import Optional

from cwc.core.config.config_manager import ConfigManager
from cwc.core.config.persistence_config import PersistenceConfig
from cwc.core.interfaces.i_key_value_storage import IKeyValueStorage
from cwc.infra.persistence.json_file_storage import JsonFileStorage
from cwc.infra.persistence.memory_storage import InMemoryStorage

logger = logging.getLogger(__name__)

class StorageFactory:

    @staticmethod
    def create(config: Optional[PersistenceConfig] = None) -> IKeyValueStorage:
        config = config or ConfigManager().persistence
        engine = config.storage_engine

        if engine == "memory":
            logger.info("Almacenamiento: MEMORIA (volátil).")
            return InMemoryStorage()
        elif engine == "json":
            return JsonFileStorage(config.storage_path)
        else:
            logger.critical(f"Motor de almacenamiento desconocido: {engine}")
            raise ValueError(f"Motor de almacenamiento no soportado: {engine}")
