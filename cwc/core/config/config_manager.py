# cwc/core/config/config_manager.py
'''
class ConfigManager:
    Orquesta y centraliza el acceso a la configuración de todos los módulos (Protocolo, Indexador y Persistencia), cargando valores desde el entorno o JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Inicializa y carga las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Orquesta la actualización de todas las sub-configuraciones a partir de un diccionario JSON completo.
        reset(cls) -> None: Descarta la instancia (usado por tests y recargas de entorno).

'''

from dotenv import load_dotenv
from typing import Dict, Any, Optional

# Cargar variables de entorno si existen
load_dotenv()

# Importar piezas de configuración
from cwc.core.config.protocol_params import ProtocolParams
from cwc.core.config.blockfrost_config import BlockfrostConfig
from cwc.core.config.persistence_config import PersistenceConfig

class ConfigManager:

    _instance: Optional["ConfigManager"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._protocol_params = ProtocolParams()   # Perfil de fees/tamaños
        self._blockfrost = BlockfrostConfig()      # Indexador remoto
        self._persistence = PersistenceConfig()    # Almacenamiento de la selección

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:

        # Protocolo (acepta "protocol_params" o "protocolParams")
        params = json_data.get("protocol_params", json_data.get("protocolParams"))
        if params:
            self._protocol_params.update_from_dict(params)

        # Indexador
        if "blockfrost" in json_data:
            self._blockfrost.update_from_dict(json_data["blockfrost"])

        # Persistencia
        if "storage" in json_data:
            self._persistence.update_from_dict(json_data["storage"])

    # --- ACCESORES ORGANIZADOS ---

    @property
    def protocol_params(self) -> ProtocolParams:
        return self._protocol_params

    @property
    def blockfrost(self) -> BlockfrostConfig:
        return self._blockfrost

    @property
    def persistence(self) -> PersistenceConfig:
        return self._persistence
