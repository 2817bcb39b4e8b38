"""
Edição dos planos ativos pelo treinador
"""
from typing import Dict, List, Optional
import logging

from src.database.models import parse_reps
from src.database.queries import utc_now
from src.utils.errors import CoachError, NotFoundError

logger = logging.getLogger(__name__)

MEAL_PLAN_FIELDS = ("name", "description", "daily_calories", "protein_grams", "carbs_grams", "fats_grams")
MEAL_FIELDS = (
    "meal_type", "name", "description", "calories", "protein_grams", "carbs_grams",
    "fats_grams", "ingredients", "instructions", "order_index"
)
WORKOUT_FIELDS = ("name", "description", "goal", "duration_weeks")
EXERCISE_FIELDS = ("day_of_week", "exercise_name", "sets", "reps", "rest_seconds", "notes", "order_index")


def _pick(data: Dict, fields) -> Dict:
    return {key: data[key] for key in fields if key in data}


def _check_ownership(stored: List[Dict], items: List[Dict], deleted_ids: List[str], label: str):
    """Todo id enviado precisa ser de um item do próprio plano"""
    owned = {row["id"] for row in stored}
    sent = [item["id"] for item in items if item.get("id")] + list(deleted_ids)
    foreign = [item_id for item_id in sent if item_id not in owned]
    if foreign:
        raise NotFoundError(f"{label} não pertence ao plano: {', '.join(foreign)}")


def _check_order(stored: List[Dict], items: List[Dict], deleted_ids: List[str], slot, label: str):
    """A posição de cada item enviado não pode coincidir com a de um item que continua no plano"""
    slots = [slot(item) for item in items if "order_index" in item]
    if len(slots) != len(set(slots)):
        raise CoachError(f"{label}: orderIndex repetido entre os itens enviados")

    touched = set(deleted_ids) | {item["id"] for item in items if item.get("id") and "order_index" in item}
    taken = {slot(row) for row in stored if row["id"] not in touched}
    clashes = sorted(set(slots) & taken)
    if clashes:
        raise CoachError(f"{label}: orderIndex já usado no plano {clashes}")


def _meal_slot(row: Dict):
    return row.get("order_index")


def _exercise_slot(row: Dict):
    return row.get("day_of_week"), row.get("order_index")


def meal_totals(meals: List[Dict]) -> Dict[str, int]:
    """Soma calorias e macros das refeições"""
    totals = {"daily_calories": 0, "protein_grams": 0, "carbs_grams": 0, "fats_grams": 0}
    for meal in meals:
        totals["daily_calories"] += meal.get("calories") or 0
        totals["protein_grams"] += meal.get("protein_grams") or 0
        totals["carbs_grams"] += meal.get("carbs_grams") or 0
        totals["fats_grams"] += meal.get("fats_grams") or 0
    return totals


class EditorService:
    """
    Salva as edições de um plano ativo: primeiro as remoções, depois
    inclusões/atualizações de cada item e por fim os campos do plano
    com updated_at novo. Antes de gravar, confere que os ids enviados
    pertencem ao plano e que nenhuma posição (order_index) se repete.
    Não há controle de concorrência.
    """

    def __init__(self, db):
        self.db = db

    async def save_meal_plan(
        self,
        client_id: str,
        plan_data: Dict,
        meals: List[Dict],
        deleted_ids: Optional[List[str]] = None,
        recalculate_totals: bool = False
    ) -> Dict:
        """Aplicar as edições ao plano alimentar ativo do cliente"""
        meal_plan = await self.db.find_active_meal_plan(client_id)
        if not meal_plan:
            raise NotFoundError("Nenhum plano alimentar ativo. Gere um plano primeiro.")

        deleted_ids = deleted_ids or []
        stored = await self.db.get_meals(meal_plan["id"])
        _check_ownership(stored, meals, deleted_ids, "Refeição")
        _check_order(stored, meals, deleted_ids, _meal_slot, "Refeições")

        await self.db.delete_meals(meal_plan["id"], deleted_ids)

        for meal in meals:
            row = _pick(meal, MEAL_FIELDS)
            if meal.get("id"):
                await self.db.update_meal(meal_plan["id"], meal["id"], row)
            else:
                await self.db.insert_meal({**row, "meal_plan_id": meal_plan["id"]})

        update = _pick(plan_data, MEAL_PLAN_FIELDS)
        if recalculate_totals:
            update.update(meal_totals(meals))
        update["updated_at"] = utc_now()

        saved = await self.db.update_meal_plan(meal_plan["id"], update)
        logger.info(
            f"Plano alimentar {meal_plan['id']} salvo: {len(meals)} refeições, "
            f"{len(deleted_ids)} removidas"
        )
        return saved or {**meal_plan, **update}

    async def save_workout(
        self,
        client_id: str,
        workout_data: Dict,
        exercises: List[Dict],
        deleted_ids: Optional[List[str]] = None
    ) -> Dict:
        """Aplicar as edições ao treino ativo do cliente"""
        workout = await self.db.find_active_workout(client_id)
        if not workout:
            raise NotFoundError("Nenhum treino ativo. Gere um treino primeiro.")

        deleted_ids = deleted_ids or []
        stored = await self.db.get_exercises(workout["id"])
        _check_ownership(stored, exercises, deleted_ids, "Exercício")
        _check_order(stored, exercises, deleted_ids, _exercise_slot, "Exercícios")

        await self.db.delete_exercises(workout["id"], deleted_ids)

        for exercise in exercises:
            row = _pick(exercise, EXERCISE_FIELDS)
            if "reps" in row:
                # Normaliza o texto ('30  MIN' -> '30 min')
                row["reps"] = parse_reps(row["reps"]).to_text()
            if exercise.get("id"):
                await self.db.update_exercise(workout["id"], exercise["id"], row)
            else:
                await self.db.insert_exercise({**row, "workout_id": workout["id"]})

        update = _pick(workout_data, WORKOUT_FIELDS)
        update["updated_at"] = utc_now()

        saved = await self.db.update_workout(workout["id"], update)
        logger.info(
            f"Treino {workout['id']} salvo: {len(exercises)} exercícios, "
            f"{len(deleted_ids)} removidos"
        )
        return saved or {**workout, **update}
