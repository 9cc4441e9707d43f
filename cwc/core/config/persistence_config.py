# cwc/core/config/persistence_config.py
import os
from typing import Dict, Any

# Importamos Paths para sincronizar las rutas
from cwc.core.config.paths import Paths

class PersistenceConfig:
    """
    Configuración de Persistencia.
    Responsable de definir dónde se guarda la selección de billetera.
    """
    def __init__(self) -> None:
        # "json" (archivo en disco) o "memory" (volátil, útil en tests)
        self._storage_engine = os.getenv("CWC_STORAGE_ENGINE", "json").lower()
        self._storage_filename = os.getenv("CWC_STORAGE_FILE", "local_storage.json")

    @property
    def storage_engine(self) -> str: return self._storage_engine
    @property
    def storage_filename(self) -> str: return self._storage_filename

    @property
    def storage_path(self) -> str:
        """Ruta completa: data/storage/<archivo>.json"""
        return os.path.join(str(Paths.STORAGE_DIR), self._storage_filename)

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """Actualiza la configuración desde un diccionario externo (JSON)."""
        if not data: return

        if "engine" in data:
            self._storage_engine = str(data["engine"]).lower()

        if "file" in data:
            self._storage_filename = str(data["file"])
