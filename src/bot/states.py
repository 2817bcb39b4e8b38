"""
Estados da conversa do bot
"""
from enum import Enum

class BotState(str, Enum):
    """Estados do bot"""
    IDLE = "idle"

    # Registro de medição
    MEASUREMENT_WEIGHT = "measurement_weight"
    MEASUREMENT_BODY_FAT = "measurement_body_fat"
