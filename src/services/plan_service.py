"""
Geração e gravação de planos alimentares e de treino
"""
from typing import Dict, List, Optional
import logging

from src.database.models import ClientProfile, Exercise, reps_to_dict
from src.services.plan_generator import generate_meal_plan, generate_workout

logger = logging.getLogger(__name__)


class PlanService:
    """
    Grava os planos gerados seguindo uma sequência com compensação:

    1. cria o plano inativo
    2. cria os itens; em caso de falha, remove o plano recém-criado
    3. desativa os demais planos ativos do cliente
    4. ativa o novo plano
    """

    def __init__(self, db):
        self.db = db

    async def _discard(self, delete, plan_id: str):
        """Remove o plano incompleto; uma falha na remoção é apenas registrada"""
        try:
            await delete(plan_id)
        except Exception as e:
            logger.error(f"Não foi possível remover o plano incompleto {plan_id}: {e}")

    async def create_meal_plan(self, client_id: str, trainer_id: str, client: ClientProfile) -> Dict:
        """Gerar e gravar o plano alimentar; retorna a linha do plano ativo"""
        plan = generate_meal_plan(client)

        meal_plan = await self.db.insert_meal_plan(plan.to_row(client_id, trainer_id, is_active=False))
        meals_data = [meal.to_row(meal_plan["id"]) for meal in plan.meals]

        try:
            await self.db.insert_meals(meals_data)
        except Exception:
            logger.error(f"Falha ao gravar refeições do plano {meal_plan['id']}, removendo o plano")
            await self._discard(self.db.delete_meal_plan, meal_plan["id"])
            raise

        await self.db.deactivate_meal_plans(client_id, keep_id=meal_plan["id"])
        activated = await self.db.update_meal_plan(meal_plan["id"], {"is_active": True})

        logger.info(f"Plano alimentar {meal_plan['id']} ativo para o cliente {client_id}")
        return activated or {**meal_plan, "is_active": True}

    async def create_workout(self, client_id: str, trainer_id: str, client: ClientProfile) -> Dict:
        """Gerar e gravar o treino; retorna a linha do treino ativo"""
        plan = generate_workout(client.fitness_goal, client.activity_level)

        workout = await self.db.insert_workout(plan.to_row(client_id, trainer_id, is_active=False))
        exercises_data = [exercise.to_row(workout["id"]) for exercise in plan.exercises]

        try:
            await self.db.insert_exercises(exercises_data)
        except Exception:
            logger.error(f"Falha ao gravar exercícios do treino {workout['id']}, removendo o treino")
            await self._discard(self.db.delete_workout, workout["id"])
            raise

        await self.db.deactivate_workouts(client_id, keep_id=workout["id"])
        activated = await self.db.update_workout(workout["id"], {"is_active": True})

        logger.info(f"Treino {workout['id']} ativo para o cliente {client_id}")
        return activated or {**workout, "is_active": True}

    async def get_active_meal_plan(self, client_id: str) -> Optional[Dict]:
        """Plano alimentar ativo com as refeições em ordem, ou None"""
        meal_plan = await self.db.find_active_meal_plan(client_id)
        if not meal_plan:
            return None
        meals = await self.db.get_meals(meal_plan["id"])
        return {**meal_plan, "meals": meals}

    async def get_active_workout(self, client_id: str) -> Optional[Dict]:
        """Treino ativo com os exercícios em ordem, ou None"""
        workout = await self.db.find_active_workout(client_id)
        if not workout:
            return None
        rows = await self.db.get_exercises(workout["id"])
        return {**workout, "exercises": [exercise_with_reps(row) for row in rows]}


def exercise_with_reps(row: Dict) -> Dict:
    """Linha do exercício acrescida do variante de repetições"""
    exercise = Exercise.from_row(row)
    return {**row, "repsDetail": reps_to_dict(exercise.reps)}


def group_by_day(exercises: List[Dict]) -> Dict[int, List[Dict]]:
    """Agrupa exercícios por dia da semana, mantendo a ordem de cada dia"""
    days: Dict[int, List[Dict]] = {}
    for exercise in sorted(exercises, key=lambda e: (e["day_of_week"], e.get("order_index", 0))):
        days.setdefault(exercise["day_of_week"], []).append(exercise)
    return days
