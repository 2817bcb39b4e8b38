"""
Cadastro de clientes e acompanhamento de medições
"""
from typing import Dict, List
import logging

from src.database.models import Measurement
from src.utils.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)


def progress_summary(measurements: List[Dict]) -> Dict:
    """
    Resumo da evolução do peso

    Returns:
        Dicionário vazio sem medições; caso contrário primeiro e último peso,
        variação em kg e em percentual (uma casa decimal)
    """
    if not measurements:
        return {}

    first_weight = measurements[0]["weight"]
    latest_weight = measurements[-1]["weight"]
    change = latest_weight - first_weight

    return {
        "count": len(measurements),
        "firstWeight": first_weight,
        "latestWeight": latest_weight,
        "weightChange": round(change, 1),
        "weightChangePercent": round(change / first_weight * 100, 1) if first_weight else 0.0
    }


class ClientService:
    """Serviço de clientes"""

    def __init__(self, db):
        self.db = db

    async def add_client(self, client_data: Dict) -> str:
        """
        Cria conta de acesso, perfil e registro do cliente

        Se o perfil ou o cliente não puderem ser gravados, a conta recém-criada
        é removida antes de propagar o erro.

        Returns:
            id do usuário criado
        """
        user_id = await self.db.create_auth_user(client_data["email"], client_data["password"])

        try:
            await self.db.create_profile({
                "id": user_id,
                "email": client_data["email"],
                "full_name": client_data["full_name"],
                "role": "client"
            })
        except StorageError as e:
            logger.error(f"Erro ao criar perfil de {client_data['email']}: {e}")
            await self.db.delete_auth_user(user_id)
            raise StorageError(f"Erro ao criar perfil: {e.message}") from e

        try:
            await self.db.create_client({
                "user_id": user_id,
                "trainer_id": client_data["trainer_id"],
                "height": client_data["height"],
                "current_weight": client_data["current_weight"],
                "goal_weight": client_data.get("goal_weight") or None,
                "fitness_goal": client_data["fitness_goal"],
                "activity_level": client_data["activity_level"],
                "gender": client_data.get("gender"),
                "date_of_birth": client_data.get("date_of_birth") or None,
                "medical_conditions": client_data.get("medical_conditions") or None,
                "dietary_restrictions": client_data.get("dietary_restrictions") or None
            })
        except StorageError as e:
            logger.error(f"Erro ao criar cliente {client_data['email']}: {e}")
            await self.db.delete_auth_user(user_id)
            raise StorageError(f"Erro ao criar cliente: {e.message}") from e

        logger.info(f"Cliente {client_data['email']} criado pelo treinador {client_data['trainer_id']}")
        return user_id

    async def record_measurement(self, measurement: Measurement) -> Dict:
        """Registrar medição e atualizar o peso atual do cliente"""
        client = await self.db.get_client(measurement.client_id)
        if not client:
            raise NotFoundError("Cliente não encontrado")

        saved = await self.db.insert_measurement(measurement.to_row())
        await self.db.update_client(measurement.client_id, {"current_weight": measurement.weight})

        logger.info(f"Medição registrada para o cliente {measurement.client_id}: {measurement.weight} kg")
        return saved

    async def get_progress(self, client_id: str) -> Dict:
        """Medições em ordem cronológica e resumo da evolução"""
        measurements = await self.db.get_measurements(client_id)
        return {
            "measurements": measurements,
            "summary": progress_summary(measurements)
        }
