"""
Consultas e operações no banco de dados (Supabase)
"""
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import logging

import httpx
from postgrest.exceptions import APIError

from src.utils.errors import StorageError

logger = logging.getLogger(__name__)


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class DatabaseQueries:
    """Repositório sobre o cliente do Supabase"""

    def __init__(self, supabase_client):
        self.client = supabase_client

    def _execute(self, request, action: str):
        try:
            return request.execute()
        except APIError as e:
            logger.error(f"Erro no Supabase ao {action}: {e.message}")
            raise StorageError(f"Erro ao {action}: {e.message}") from e
        except httpx.HTTPError as e:
            logger.error(f"Falha de conexão com o Supabase ao {action}: {e}")
            raise StorageError(f"Erro ao {action}: falha de conexão") from e

    def _insert_one(self, table: str, row: Dict, action: str) -> Dict:
        result = self._execute(self.client.table(table).insert(row), action)
        if not result.data:
            raise StorageError(f"Erro ao {action}: nenhum registro retornado")
        return result.data[0]

    def _insert_many(self, table: str, rows: List[Dict], action: str) -> List[Dict]:
        if not rows:
            return []
        result = self._execute(self.client.table(table).insert(rows), action)
        return result.data

    def _find_active(self, table: str, client_id: str, action: str) -> Optional[Dict]:
        # Mais recente primeiro: tolera duas linhas ativas deixadas por gerações concorrentes
        result = self._execute(
            self.client.table(table).select("*")
            .eq("client_id", client_id)
            .eq("is_active", True)
            .order("created_at", desc=True)
            .limit(1),
            action
        )
        return result.data[0] if result.data else None

    # ===== CLIENTES =====
    async def get_client(self, client_id: str) -> Optional[Dict]:
        """Obter os dados do cliente"""
        result = self._execute(
            self.client.table("clients").select("*").eq("id", client_id),
            "buscar cliente"
        )
        return result.data[0] if result.data else None

    async def update_client(self, client_id: str, client_data: Dict) -> Dict:
        """Atualizar os dados do cliente"""
        client_data["updated_at"] = utc_now()
        result = self._execute(
            self.client.table("clients").update(client_data).eq("id", client_id),
            "atualizar cliente"
        )
        return result.data[0] if result.data else {}

    async def create_client(self, client_data: Dict) -> Dict:
        """Criar o registro do cliente"""
        return self._insert_one("clients", client_data, "criar cliente")

    async def create_profile(self, profile_data: Dict) -> Dict:
        """Criar o perfil (tabela profiles)"""
        return self._insert_one("profiles", profile_data, "criar perfil")

    # ===== AUTENTICAÇÃO =====
    async def create_auth_user(self, email: str, password: str) -> str:
        """Criar a conta de acesso com e-mail já confirmado; retorna o id do usuário"""
        try:
            response = self.client.auth.admin.create_user({
                "email": email,
                "password": password,
                "email_confirm": True
            })
        except Exception as e:
            logger.error(f"Erro de autenticação ao criar conta {email}: {e}")
            raise StorageError(f"Erro ao criar conta: {e}") from e

        if not response or not response.user:
            raise StorageError("Erro ao criar usuario")
        return response.user.id

    async def delete_auth_user(self, user_id: str) -> None:
        """Remover a conta de acesso"""
        try:
            self.client.auth.admin.delete_user(user_id)
        except Exception as e:
            logger.error(f"Erro ao remover conta {user_id}: {e}")
            raise StorageError(f"Erro ao remover conta: {e}") from e

    # ===== PLANOS ALIMENTARES =====
    async def insert_meal_plan(self, plan_data: Dict) -> Dict:
        """Criar plano alimentar"""
        return self._insert_one("meal_plans", plan_data, "criar plano alimentar")

    async def insert_meals(self, meals_data: List[Dict]) -> List[Dict]:
        """Criar as refeições do plano em lote"""
        return self._insert_many("meals", meals_data, "criar refeições")

    async def find_active_meal_plan(self, client_id: str) -> Optional[Dict]:
        """Obter o plano alimentar ativo do cliente"""
        return self._find_active("meal_plans", client_id, "buscar plano alimentar")

    async def get_meals(self, meal_plan_id: str) -> List[Dict]:
        """Refeições do plano em ordem"""
        result = self._execute(
            self.client.table("meals").select("*")
            .eq("meal_plan_id", meal_plan_id)
            .order("order_index"),
            "buscar refeições"
        )
        return result.data

    async def update_meal_plan(self, meal_plan_id: str, plan_data: Dict) -> Dict:
        """Atualizar plano alimentar"""
        result = self._execute(
            self.client.table("meal_plans").update(plan_data).eq("id", meal_plan_id),
            "atualizar plano alimentar"
        )
        return result.data[0] if result.data else {}

    async def deactivate_meal_plans(self, client_id: str, keep_id: Optional[str] = None) -> None:
        """Desativar os planos alimentares ativos do cliente, exceto keep_id"""
        request = self.client.table("meal_plans").update({"is_active": False, "updated_at": utc_now()})\
            .eq("client_id", client_id)\
            .eq("is_active", True)
        if keep_id:
            request = request.neq("id", keep_id)
        self._execute(request, "desativar planos alimentares")

    async def delete_meal_plan(self, meal_plan_id: str) -> None:
        """Remover plano alimentar (refeições removidas em cascata)"""
        self._execute(
            self.client.table("meal_plans").delete().eq("id", meal_plan_id),
            "remover plano alimentar"
        )

    async def insert_meal(self, meal_data: Dict) -> Dict:
        return self._insert_one("meals", meal_data, "criar refeição")

    async def update_meal(self, meal_plan_id: str, meal_id: str, meal_data: Dict) -> Dict:
        result = self._execute(
            self.client.table("meals").update(meal_data)
            .eq("meal_plan_id", meal_plan_id)
            .eq("id", meal_id),
            "atualizar refeição"
        )
        return result.data[0] if result.data else {}

    async def delete_meals(self, meal_plan_id: str, meal_ids: List[str]) -> None:
        if not meal_ids:
            return
        self._execute(
            self.client.table("meals").delete()
            .eq("meal_plan_id", meal_plan_id)
            .in_("id", meal_ids),
            "remover refeições"
        )

    # ===== TREINOS =====
    async def insert_workout(self, workout_data: Dict) -> Dict:
        """Criar treino"""
        return self._insert_one("workouts", workout_data, "criar treino")

    async def insert_exercises(self, exercises_data: List[Dict]) -> List[Dict]:
        """Criar os exercícios do treino em lote"""
        return self._insert_many("exercises", exercises_data, "criar exercícios")

    async def find_active_workout(self, client_id: str) -> Optional[Dict]:
        """Obter o treino ativo do cliente"""
        return self._find_active("workouts", client_id, "buscar treino")

    async def get_exercises(self, workout_id: str) -> List[Dict]:
        """Exercícios do treino ordenados por dia e ordem"""
        result = self._execute(
            self.client.table("exercises").select("*")
            .eq("workout_id", workout_id)
            .order("day_of_week")
            .order("order_index"),
            "buscar exercícios"
        )
        return result.data

    async def update_workout(self, workout_id: str, workout_data: Dict) -> Dict:
        """Atualizar treino"""
        result = self._execute(
            self.client.table("workouts").update(workout_data).eq("id", workout_id),
            "atualizar treino"
        )
        return result.data[0] if result.data else {}

    async def deactivate_workouts(self, client_id: str, keep_id: Optional[str] = None) -> None:
        """Desativar os treinos ativos do cliente, exceto keep_id"""
        request = self.client.table("workouts").update({"is_active": False, "updated_at": utc_now()})\
            .eq("client_id", client_id)\
            .eq("is_active", True)
        if keep_id:
            request = request.neq("id", keep_id)
        self._execute(request, "desativar treinos")

    async def delete_workout(self, workout_id: str) -> None:
        """Remover treino (exercícios removidos em cascata)"""
        self._execute(
            self.client.table("workouts").delete().eq("id", workout_id),
            "remover treino"
        )

    async def insert_exercise(self, exercise_data: Dict) -> Dict:
        return self._insert_one("exercises", exercise_data, "criar exercício")

    async def update_exercise(self, workout_id: str, exercise_id: str, exercise_data: Dict) -> Dict:
        result = self._execute(
            self.client.table("exercises").update(exercise_data)
            .eq("workout_id", workout_id)
            .eq("id", exercise_id),
            "atualizar exercício"
        )
        return result.data[0] if result.data else {}

    async def delete_exercises(self, workout_id: str, exercise_ids: List[str]) -> None:
        if not exercise_ids:
            return
        self._execute(
            self.client.table("exercises").delete()
            .eq("workout_id", workout_id)
            .in_("id", exercise_ids),
            "remover exercícios"
        )

    # ===== MEDIÇÕES =====
    async def insert_measurement(self, measurement_data: Dict[str, Any]) -> Dict:
        """Registrar medição"""
        return self._insert_one("measurements", measurement_data, "registrar medição")

    async def get_measurements(self, client_id: str) -> List[Dict]:
        """Medições do cliente em ordem cronológica"""
        result = self._execute(
            self.client.table("measurements").select("*")
            .eq("client_id", client_id)
            .order("measured_at", desc=False),
            "buscar medições"
        )
        return result.data
