"""
Visualização do treino e do plano alimentar ativos
"""
from typing import Dict, List
from telegram import Update
from telegram.ext import ContextTypes
from src.bot.handlers.start import NOT_LINKED_MESSAGE
from src.bot.keyboards.inline import InlineKeyboards
from src.config import MEAL_TYPES, WEEKDAYS
from src.database.models import Duration, parse_reps
from src.services.plan_service import group_by_day
import logging

logger = logging.getLogger(__name__)

NO_WORKOUT_MESSAGE = "⚠️ Você ainda não tem um treino ativo. Peça ao seu treinador para gerar um!"
NO_MEAL_PLAN_MESSAGE = "⚠️ Você ainda não tem um plano alimentar ativo. Peça ao seu treinador para gerar um!"


def format_exercise(exercise: Dict) -> str:
    """Linha de um exercício: séries x repetições ou duração"""
    reps = parse_reps(exercise["reps"])
    if isinstance(reps, Duration):
        volume = reps.to_text() if exercise["sets"] <= 1 else f"{exercise['sets']}x {reps.to_text()}"
    else:
        volume = f"{exercise['sets']}x {reps.to_text()}"

    line = f"• {exercise['exercise_name']} - {volume} (descanso {exercise.get('rest_seconds', 0)}s)"
    if exercise.get('notes'):
        line += f"\n   💡 {exercise['notes']}"
    return line


def format_workout_overview(workout: Dict) -> str:
    """Resumo do treino com a quantidade de exercícios por dia"""
    days = group_by_day(workout["exercises"])
    lines = [
        f"🏋️ {workout['name']}",
        "",
        workout.get('description') or "",
        f"⏳ Duração: {workout.get('duration_weeks')} semanas",
        ""
    ]
    for day, exercises in days.items():
        lines.append(f"📅 {WEEKDAYS[day]}: {len(exercises)} exercícios")
    return "\n".join(lines)


def format_workout_day(workout: Dict, day: int) -> str:
    """Exercícios de um dia do treino"""
    exercises = group_by_day(workout["exercises"]).get(day, [])
    if not exercises:
        return f"😴 {WEEKDAYS[day]}: descanso"
    lines = [f"📅 {WEEKDAYS[day].upper()}", ""]
    lines.extend(format_exercise(exercise) for exercise in exercises)
    return "\n".join(lines)


def format_meal_plan(meal_plan: Dict) -> str:
    """Plano alimentar com metas diárias e refeições"""
    lines = [
        f"🥗 {meal_plan['name']}",
        "",
        "📊 Meta diária:",
        f"🔥 Calorias: {meal_plan['daily_calories']} kcal",
        f"🥩 Proteínas: {meal_plan['protein_grams']} g",
        f"🍞 Carboidratos: {meal_plan['carbs_grams']} g",
        f"🥑 Gorduras: {meal_plan['fats_grams']} g",
    ]
    meals: List[Dict] = sorted(meal_plan.get("meals", []), key=lambda m: m.get("order_index", 0))
    for meal in meals:
        lines.extend([
            "",
            f"🍽 {MEAL_TYPES.get(meal['meal_type'], meal['meal_type'])} - {meal['name']}",
            f"   {meal['calories']} kcal | P {meal['protein_grams']} g | "
            f"C {meal['carbs_grams']} g | G {meal['fats_grams']} g",
            meal.get('ingredients') or ""
        ])
    return "\n".join(lines)


async def workout_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Mostrar o treino ativo"""
    query = update.callback_query
    await query.answer()

    client_id = context.user_data.get('client_id')
    if not client_id:
        await query.edit_message_text(NOT_LINKED_MESSAGE)
        return

    try:
        workout = await context.bot_data['plans'].get_active_workout(client_id)
    except Exception as e:
        logger.error(f"Erro ao carregar treino do cliente {client_id}: {e}")
        await query.edit_message_text("❌ Não foi possível carregar o treino. Tente novamente.",
                                      reply_markup=InlineKeyboards.back_to_menu())
        return

    if not workout:
        await query.edit_message_text(NO_WORKOUT_MESSAGE, reply_markup=InlineKeyboards.back_to_menu())
        return

    context.user_data['workout'] = workout
    days = list(group_by_day(workout["exercises"]).keys())

    await query.edit_message_text(
        text=format_workout_overview(workout),
        reply_markup=InlineKeyboards.workout_days(days)
    )


async def workout_day_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Mostrar os exercícios de um dia"""
    query = update.callback_query
    await query.answer()

    day = int(query.data.rsplit('_', 1)[1])  # workout_day_3 -> 3
    workout = context.user_data.get('workout')

    if not workout:
        await query.edit_message_text(NO_WORKOUT_MESSAGE, reply_markup=InlineKeyboards.back_to_menu())
        return

    await query.edit_message_text(
        text=format_workout_day(workout, day),
        reply_markup=InlineKeyboards.back_to_workout()
    )


async def meal_plan_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Mostrar o plano alimentar ativo"""
    query = update.callback_query
    await query.answer()

    client_id = context.user_data.get('client_id')
    if not client_id:
        await query.edit_message_text(NOT_LINKED_MESSAGE)
        return

    try:
        meal_plan = await context.bot_data['plans'].get_active_meal_plan(client_id)
    except Exception as e:
        logger.error(f"Erro ao carregar plano alimentar do cliente {client_id}: {e}")
        await query.edit_message_text("❌ Não foi possível carregar o plano alimentar. Tente novamente.",
                                      reply_markup=InlineKeyboards.back_to_menu())
        return

    if not meal_plan:
        await query.edit_message_text(NO_MEAL_PLAN_MESSAGE, reply_markup=InlineKeyboards.back_to_menu())
        return

    await query.edit_message_text(
        text=format_meal_plan(meal_plan),
        reply_markup=InlineKeyboards.back_to_menu()
    )
