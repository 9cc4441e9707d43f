# cwc/core/config/protocol_constants.py

from typing import Final

class ProtocolConstants:
    """
    Vocabulario inmutable del protocolo.
    Centraliza:
    1. Identificadores de red y unidades monetarias (CIP-30 / Ledger).
    2. Claves de almacenamiento y espacios de nombres del host.
    """

    # ==========================================================================
    # 1. METADATOS GLOBALES
    # ==========================================================================
    USER_AGENT: Final[str] = "CardanoWalletConnector/1.0"

    # ==========================================================================
    # 2. RED (getNetworkId)
    # ==========================================================================
    TESTNET_NETWORK_ID: Final[int] = 0
    MAINNET_NETWORK_ID: Final[int] = 1

    # ==========================================================================
    # 3. UNIDADES MONETARIAS
    # ==========================================================================
    # 1 ADA = 1.000.000 Lovelace (fijo por protocolo, no configurable)
    ADA_DECIMALS: Final[int] = 6
    LOVELACE_PER_ADA: Final[int] = 10 ** ADA_DECIMALS

    # ==========================================================================
    # 4. HOST Y PERSISTENCIA
    # ==========================================================================
    # Los proveedores CIP-30 se inyectan en window.cardano[<wallet_key>]
    HOST_WALLET_NAMESPACE: Final[str] = "cardano"

    # Única clave que este sistema posee en el almacenamiento clave-valor
    STORAGE_KEY: Final[str] = "cardanoWallet"

    # ==========================================================================
    # 5. CONSTRUCCIÓN DE TRANSACCIONES
    # ==========================================================================
    # Estrategia de selección de inputs delegada al motor de serialización
    INPUT_SELECTION_STRATEGY: Final[int] = 0

    # ==========================================================================
    # 6. INDEXADOR (Blockfrost)
    # ==========================================================================
    BLOCKFROST_API_VERSION: Final[str] = "v0"
    BLOCKFROST_AUTH_HEADER: Final[str] = "project_id"
