"""
Esquemas das requisições HTTP

Os campos usam snake_case no código e camelCase no JSON.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- GERAÇÃO ---
class ClientData(CamelModel):
    height: float = Field(gt=0)
    weight: float = Field(gt=0)
    goal_weight: Optional[float] = None
    fitness_goal: str
    activity_level: Optional[str] = None
    gender: Optional[str] = None
    dietary_restrictions: Optional[str] = None


class GenerateRequest(CamelModel):
    client_id: str
    trainer_id: str
    client_data: ClientData


# --- CLIENTES ---
class AddClientRequest(CamelModel):
    trainer_id: str
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)
    height: float = Field(gt=0)
    current_weight: float = Field(gt=0)
    goal_weight: Optional[float] = None
    fitness_goal: Literal["lose_weight", "gain_muscle", "maintain", "improve_endurance"]
    activity_level: Literal["sedentary", "light", "moderate", "active", "very_active"]
    gender: Optional[Literal["male", "female", "other"]] = None
    date_of_birth: Optional[str] = None
    medical_conditions: Optional[str] = None
    dietary_restrictions: Optional[str] = None


class MeasurementRequest(CamelModel):
    weight: float = Field(gt=0)
    body_fat_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    left_arm: Optional[float] = None
    right_arm: Optional[float] = None
    left_thigh: Optional[float] = None
    right_thigh: Optional[float] = None
    left_calf: Optional[float] = None
    right_calf: Optional[float] = None
    notes: Optional[str] = None
    measured_at: Optional[datetime] = None


# --- EDITORES ---
class MealIn(CamelModel):
    id: Optional[str] = None
    meal_type: Literal["breakfast", "snack", "lunch", "dinner"]
    name: str
    description: Optional[str] = None
    calories: int = 0
    protein_grams: int = 0
    carbs_grams: int = 0
    fats_grams: int = 0
    ingredients: str = ""
    instructions: Optional[str] = None
    order_index: int = Field(ge=0)


class MealPlanEditRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    daily_calories: Optional[int] = None
    protein_grams: Optional[int] = None
    carbs_grams: Optional[int] = None
    fats_grams: Optional[int] = None
    meals: List[MealIn] = []
    deleted_ids: List[str] = []
    recalculate_totals: bool = False

    @model_validator(mode="after")
    def unique_order(self):
        orders = [meal.order_index for meal in self.meals]
        if len(orders) != len(set(orders)):
            raise ValueError("orderIndex repetido entre as refeições")
        return self


class ExerciseIn(CamelModel):
    id: Optional[str] = None
    day_of_week: int = Field(ge=0, le=6)
    exercise_name: str
    sets: int = Field(ge=0)
    reps: str
    rest_seconds: int = Field(default=0, ge=0)
    notes: Optional[str] = None
    order_index: int = Field(ge=0)


class WorkoutEditRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    goal: Optional[str] = None
    duration_weeks: Optional[int] = Field(default=None, gt=0)
    exercises: List[ExerciseIn] = []
    deleted_ids: List[str] = []

    @model_validator(mode="after")
    def unique_order_per_day(self):
        slots = [(exercise.day_of_week, exercise.order_index) for exercise in self.exercises]
        if len(slots) != len(set(slots)):
            raise ValueError("orderIndex repetido no mesmo dia")
        return self
