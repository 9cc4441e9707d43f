# cwc/infra/persistence/memory_storage.py
from typing import Dict, Optional

from cwc.core.interfaces.i_key_value_storage import IKeyValueStorage

class InMemoryStorage(IKeyValueStorage):
    """Volátil. Útil en tests y en procesos sin disco."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
