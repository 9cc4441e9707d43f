# cwc/core/interfaces/i_key_value_storage.py

from abc import ABC, abstractmethod
from typing import Optional

class IKeyValueStorage(ABC):
    """
    Contrato de persistencia clave-valor (equivalente a window.localStorage).
    Los valores son strings opacos; el conector guarda JSON.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retorna el valor o None si la clave no existe."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Eliminar una clave inexistente no es un error."""
        pass
