"""
Geradores de planos alimentares e de treino

Funções puras: não acessam o banco de dados.
"""
from typing import Optional
import logging

from src.config import WORKOUT_DURATION_WEEKS
from src.database.models import ClientProfile, Exercise, Meal, MealPlan, Workout, parse_reps
from src.utils.calculators import NutritionCalculator, round_half_up
from src.utils.templates import (
    DEFAULT_MEAL_PLAN_NAME,
    DEFAULT_WORKOUT_GOAL,
    MEAL_PLAN_NAMES,
    MEAL_TEMPLATES,
    WORKOUT_TEMPLATES
)

logger = logging.getLogger(__name__)


def generate_meal_plan(client: ClientProfile) -> MealPlan:
    """
    Gera o plano alimentar de 5 refeições a partir dos dados do cliente

    Cada valor numérico da refeição é a proporção fixa do total do plano,
    arredondada de forma independente. A soma das refeições pode diferir
    levemente do total do plano.
    """
    target = NutritionCalculator.calculate_nutrition_target(
        weight=client.weight,
        height=client.height,
        gender=client.gender,
        activity_level=client.activity_level,
        fitness_goal=client.fitness_goal
    )
    daily_calories = target["daily_calories"]

    meals = []
    for template in MEAL_TEMPLATES:
        shares = template["shares"]
        meals.append(Meal(
            meal_type=template["meal_type"],
            name=template["name"],
            description=template["description"],
            calories=round_half_up(daily_calories * shares["calories"]),
            protein_grams=round_half_up(target["protein"] * shares["protein"]),
            carbs_grams=round_half_up(target["carbs"] * shares["carbs"]),
            fats_grams=round_half_up(target["fats"] * shares["fats"]),
            ingredients=template["ingredients"],
            instructions=template["instructions"],
            order_index=template["order_index"]
        ))

    plan = MealPlan(
        name=MEAL_PLAN_NAMES.get(client.fitness_goal, DEFAULT_MEAL_PLAN_NAME),
        description=f"Plano alimentar personalizado com {daily_calories} calorias diárias",
        daily_calories=daily_calories,
        protein_grams=target["protein"],
        carbs_grams=target["carbs"],
        fats_grams=target["fats"],
        meals=meals
    )

    logger.info(f"Plano alimentar gerado: '{plan.name}' com {len(meals)} refeições")
    return plan


def generate_workout(fitness_goal: Optional[str], activity_level: Optional[str] = None) -> Workout:
    """
    Seleciona o modelo de treino pelo objetivo

    Objetivos desconhecidos usam o modelo 'maintain'. O nível de atividade
    é aceito mas não altera o modelo.
    """
    template = WORKOUT_TEMPLATES.get(fitness_goal) or WORKOUT_TEMPLATES[DEFAULT_WORKOUT_GOAL]

    exercises = [
        Exercise(
            day_of_week=day,
            exercise_name=name,
            sets=sets,
            reps=parse_reps(reps),
            rest_seconds=rest,
            notes=notes,
            order_index=order
        )
        for day, name, sets, reps, rest, notes, order in template["exercises"]
    ]

    workout = Workout(
        name=template["name"],
        description=template["description"],
        goal=fitness_goal,
        duration_weeks=WORKOUT_DURATION_WEEKS,
        exercises=exercises
    )

    logger.info(
        f"Treino gerado: '{workout.name}' com {len(exercises)} exercícios "
        f"em {len(workout.days)} dias (objetivo '{fitness_goal}', atividade '{activity_level}')"
    )
    return workout
