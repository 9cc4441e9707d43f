# cwc/core/enums/connection_state.py

from enum import Enum

class ConnectionState(str, Enum):
    DISCONNECTED = "DISCONNECTED"
    VALIDATING = "VALIDATING"
    ENABLING = "ENABLING"
    CONNECTED = "CONNECTED"
