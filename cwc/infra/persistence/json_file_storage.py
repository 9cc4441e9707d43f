# cwc/infra/persistence/json_file_storage.py

import json
import os
import logging
from typing import Dict, Optional

from cwc.core.interfaces.i_key_value_storage import IKeyValueStorage

logger = logging.getLogger(__name__)

class JsonFileStorage(IKeyValueStorage):
    """
    Almacenamiento clave-valor respaldado por un único archivo JSON
    (equivalente de escritorio a window.localStorage).
    """

    def __init__(self, filepath: str) -> None:
        self.filepath = filepath
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        logger.info(f"📂 JsonFileStorage activo. Archivo: {self.filepath}")

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.filepath):
            return {}

        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"❌ El archivo '{self.filepath}' está corrupto o no es un JSON válido.")
            raise

        if not isinstance(data, dict):
            raise ValueError(f"Formato inválido en {self.filepath}: se esperaba un objeto JSON.")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        try:
            tmp_path = f"{self.filepath}.tmp"
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)
            os.replace(tmp_path, self.filepath)
        except Exception:
            logger.exception(f"❌ Error al escribir el almacenamiento '{self.filepath}'")
            raise

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug(f"💾 Clave '{key}' guardada.")

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
            logger.debug(f"🗑️ Clave '{key}' eliminada.")
