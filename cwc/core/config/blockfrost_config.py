# cwc/core/config/blockfrost_config.py

import os
from typing import Dict, Any

from cwc.core.config.protocol_constants import ProtocolConstants

class BlockfrostConfig:
    """
    Configuración específica del indexador remoto (Blockfrost).
    La URL base y el project id son datos del despliegue, nunca del código.
    """
    def __init__(self) -> None:
        self._base_url: str = os.getenv("BLOCKFROST_URL", "").rstrip("/")
        self._project_id: str = os.getenv("PUBLIC_BLOCKFROST_PROJECT_ID", "")
        self._api_version: str = os.getenv("BLOCKFROST_API_VERSION", ProtocolConstants.BLOCKFROST_API_VERSION)
        self._timeout_sec: float = float(os.getenv("BLOCKFROST_TIMEOUT_SEC", 30))

    # --- Getters Públicos (Solo Lectura) ---
    @property
    def base_url(self) -> str: return self._base_url
    @property
    def project_id(self) -> str: return self._project_id
    @property
    def api_version(self) -> str: return self._api_version
    @property
    def timeout_sec(self) -> float: return self._timeout_sec

    # --- Método de Actualización Controlada ---
    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Inyecta configuración externa (JSON) respetando el encapsulamiento.
        """
        if not data: return

        if "url" in data:
            self._base_url = str(data["url"]).rstrip("/")

        if "project_id" in data:
            self._project_id = str(data["project_id"])

        if "api_version" in data:
            self._api_version = str(data["api_version"])

        if "timeout_sec" in data:
            self._timeout_sec = float(data["timeout_sec"])
