"""
Calculadora de calorias e macronutrientes
"""
import math
from typing import Dict, Optional
import logging

from src.config import (
    ACTIVITY_MULTIPLIERS,
    DEFAULT_ACTIVITY_MULTIPLIER,
    DEFAULT_AGE,
    GOAL_CALORIE_ADJUSTMENTS
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Arredonda .5 para cima (2.5 -> 3, -2.5 -> -2), sem o arredondamento bancário do round()"""
    return int(math.floor(value + 0.5))


class NutritionCalculator:
    """Calculadora das metas diárias de energia e macros"""

    @staticmethod
    def calculate_bmr_mifflin(weight: float, height: float, gender: Optional[str], age: int = DEFAULT_AGE) -> float:
        """
        Metabolismo basal pela fórmula de Mifflin-St Jeor

        Args:
            weight: peso em kg
            height: altura em cm
            gender: 'male', 'female', 'other' ou None
            age: idade em anos (fixa em 30, a idade não é coletada)

        Returns:
            BMR em kcal/dia
        """
        if gender == 'male':
            bmr = (10 * weight) + (6.25 * height) - (5 * age) + 5
        else:  # female / other / não informado
            bmr = (10 * weight) + (6.25 * height) - (5 * age) - 161

        logger.info(f"BMR (Mifflin): {bmr:.2f} kcal para {gender}, {weight} kg, {height} cm")
        return bmr

    @staticmethod
    def calculate_tdee(bmr: float, activity_level: Optional[str]) -> float:
        """
        Gasto energético total (TDEE) considerando o nível de atividade

        Níveis desconhecidos ou ausentes usam o multiplicador moderado (1.55).
        """
        multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
        tdee = bmr * multiplier

        logger.info(f"TDEE: {tdee:.2f} kcal (BMR: {bmr:.2f} * {multiplier})")
        return tdee

    @staticmethod
    def calculate_target_calories(tdee: float, fitness_goal: Optional[str]) -> int:
        """
        Calorias diárias alvo de acordo com o objetivo

        lose_weight: -500 kcal, gain_muscle: +300 kcal, demais objetivos sem ajuste.
        Não há limite mínimo: entradas extremas podem gerar valores baixos ou negativos.
        """
        target = tdee + GOAL_CALORIE_ADJUSTMENTS.get(fitness_goal, 0)
        daily_calories = round_half_up(target)

        logger.info(f"Calorias alvo: {daily_calories} kcal para o objetivo '{fitness_goal}'")
        return daily_calories

    @staticmethod
    def calculate_daily_calories(
        weight: float,
        height: float,
        gender: Optional[str],
        activity_level: Optional[str],
        fitness_goal: Optional[str]
    ) -> int:
        """Calorias diárias a partir das métricas corporais e do objetivo"""
        bmr = NutritionCalculator.calculate_bmr_mifflin(weight, height, gender)
        tdee = NutritionCalculator.calculate_tdee(bmr, activity_level)
        return NutritionCalculator.calculate_target_calories(tdee, fitness_goal)

    @staticmethod
    def calculate_macros(daily_calories: int, weight: float) -> Dict[str, int]:
        """
        Macronutrientes em gramas

        Proteína: 2 g por kg de peso
        Gordura: 25% das calorias (9 kcal/g)
        Carboidratos: o restante das calorias (4 kcal/g), absorvendo o erro de arredondamento

        Returns:
            Dicionário com protein, carbs e fats em gramas
        """
        protein = round_half_up(weight * 2)
        fats = round_half_up(daily_calories * 0.25 / 9)
        carbs = round_half_up((daily_calories - protein * 4 - fats * 9) / 4)

        if carbs < 0:
            logger.warning(f"Carboidratos negativos ({carbs} g) para {daily_calories} kcal e {weight} kg")

        logger.info(f"Macros: P:{protein}g, C:{carbs}g, G:{fats}g")
        return {
            "protein": protein,
            "carbs": carbs,
            "fats": fats
        }

    @staticmethod
    def calculate_nutrition_target(
        weight: float,
        height: float,
        gender: Optional[str],
        activity_level: Optional[str],
        fitness_goal: Optional[str]
    ) -> Dict[str, int]:
        """
        Cálculo completo da meta nutricional

        Returns:
            Dicionário com daily_calories, protein, carbs e fats
        """
        daily_calories = NutritionCalculator.calculate_daily_calories(
            weight, height, gender, activity_level, fitness_goal
        )
        macros = NutritionCalculator.calculate_macros(daily_calories, weight)

        return {
            "daily_calories": daily_calories,
            "protein": macros["protein"],
            "carbs": macros["carbs"],
            "fats": macros["fats"]
        }
