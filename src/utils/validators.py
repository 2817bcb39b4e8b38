"""
Validadores de dados informados pelo usuário
"""
from typing import Tuple, Optional
import re

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE
)


class DataValidator:
    """Validação de dados do usuário"""

    @staticmethod
    def validate_weight(weight_str: str) -> Tuple[bool, Optional[float], str]:
        """Validação do peso"""
        try:
            weight = float(weight_str.strip().replace(',', '.'))
            if 30 <= weight <= 300:
                return True, weight, ""
            else:
                return False, None, "O peso deve estar entre 30 e 300 kg"
        except ValueError:
            return False, None, "Por favor, informe um número válido"

    @staticmethod
    def validate_body_fat(body_fat_str: str) -> Tuple[bool, Optional[float], str]:
        """Validação do percentual de gordura"""
        try:
            body_fat = float(body_fat_str.strip().replace(',', '.').rstrip('%'))
            if 2 <= body_fat <= 70:
                return True, body_fat, ""
            else:
                return False, None, "O percentual de gordura deve estar entre 2 e 70%"
        except ValueError:
            return False, None, "Por favor, informe um número válido"

    @staticmethod
    def validate_client_id(client_id: str) -> Tuple[bool, Optional[str], str]:
        """Validação do código do cliente (UUID)"""
        client_id = (client_id or "").strip()
        if _UUID_PATTERN.match(client_id):
            return True, client_id.lower(), ""
        return False, None, "Código de cliente inválido"
