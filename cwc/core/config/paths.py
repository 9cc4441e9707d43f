# cwc/core/config/paths.py

import os
from pathlib import Path
from typing import Dict

class Paths:
    """
    Centraliza las rutas absolutas del proyecto.
    Soporta Inyección de Dependencias vía Variables de Entorno.
    """

    # 1. Detectamos la raíz del código (Fallback)
    _CODE_ROOT = Path(__file__).resolve().parent.parent.parent.parent

    # 2. Si existe la variable de entorno, la usa. Si no, usa el default (_CODE_ROOT/data).
    DATA_DIR = Path(os.getenv("CWC_DATA_DIR", _CODE_ROOT / "data"))

    # 3. SUBCARPETAS
    STORAGE_DIR = DATA_DIR / "storage"
    LOGS_DIR = DATA_DIR / "logs"

    @staticmethod
    def ensure_directories_exist() -> Dict[str, str]:
        """Crea toda la estructura de carpetas si no existe."""
        os.makedirs(Paths.STORAGE_DIR, exist_ok=True)
        os.makedirs(Paths.LOGS_DIR, exist_ok=True)

        return {
            "root": str(Paths.DATA_DIR),
            "logs": str(Paths.LOGS_DIR)
        }
