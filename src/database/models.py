"""
Modelos de dados das tabelas do Supabase
"""
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Dict, List, Union, Any
import re


# ===== REPS =====
_DURATION_PATTERN = re.compile(r"^\s*(\d+(?:[.,]\d+)?)\s*(min|seg)\s*(cada)?\s*$", re.IGNORECASE)
_PER_SIDE_SUFFIX = re.compile(r"\s+cada\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class RepRange:
    """Faixa de repetições, por exemplo '10-12' ou '12-15 cada'"""
    range: str
    per_side: bool = False
    kind: str = field(default="reps", init=False)

    def to_text(self) -> str:
        return f"{self.range} cada" if self.per_side else self.range


@dataclass(frozen=True)
class Duration:
    """Duração em segundos, mantendo a unidade digitada ('min' ou 'seg')"""
    seconds: int
    per_side: bool = False
    unit: str = "seg"
    kind: str = field(default="duration", init=False)

    @property
    def minutes(self) -> float:
        return self.seconds / 60

    def to_text(self) -> str:
        if self.unit == "min":
            amount = f"{self.minutes:g}".replace('.', ',')
        else:
            amount = str(self.seconds)
        text = f"{amount} {self.unit}"
        return f"{text} cada" if self.per_side else text


Reps = Union[RepRange, Duration]


def parse_reps(text: str) -> Reps:
    """
    Converte o texto livre da coluna reps no variante correspondente

    '30 min' e '45 seg' viram Duration; qualquer outro texto é tratado como RepRange.
    """
    text = (text or "").strip()
    match = _DURATION_PATTERN.match(text)
    if match:
        amount = float(match.group(1).replace(',', '.'))
        unit = match.group(2).lower()
        seconds = round(amount * 60) if unit == "min" else round(amount)
        return Duration(seconds=seconds, per_side=bool(match.group(3)), unit=unit)

    per_side = bool(_PER_SIDE_SUFFIX.search(text))
    if per_side:
        text = _PER_SIDE_SUFFIX.sub("", text)
    return RepRange(range=text, per_side=per_side)


def reps_to_dict(reps: Reps) -> Dict[str, Any]:
    """Representação serializável do variante"""
    if isinstance(reps, Duration):
        return {
            "kind": reps.kind, "seconds": reps.seconds, "minutes": reps.minutes,
            "unit": reps.unit, "perSide": reps.per_side
        }
    return {"kind": reps.kind, "range": reps.range, "perSide": reps.per_side}


# ===== CLIENTES =====
@dataclass
class ClientProfile:
    """Dados corporais do cliente usados na geração dos planos"""
    height: float  # cm
    weight: float  # kg
    goal_weight: Optional[float] = None  # kg
    gender: Optional[str] = None  # male/female/other
    activity_level: Optional[str] = None  # sedentary, light, moderate, active, very_active
    fitness_goal: Optional[str] = None  # lose_weight, gain_muscle, maintain, improve_endurance
    dietary_restrictions: Optional[str] = None


@dataclass
class Measurement:
    """Medição corporal do cliente"""
    client_id: str
    weight: float
    body_fat_percentage: Optional[float] = None
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
    id: Optional[str] = None
    measured_at: Optional[datetime] = None

    def to_row(self) -> Dict:
        row = asdict(self)
        for key in ("id", "measured_at"):
            if row[key] is None:
                row.pop(key)
        if isinstance(row.get("measured_at"), datetime):
            row["measured_at"] = row["measured_at"].isoformat()
        return row


# ===== PLANOS ALIMENTARES =====
@dataclass
class Meal:
    """Refeição de um plano alimentar"""
    meal_type: str  # breakfast, snack, lunch, dinner
    name: str
    calories: int
    protein_grams: int
    carbs_grams: int
    fats_grams: int
    ingredients: str
    order_index: int
    description: Optional[str] = None
    instructions: Optional[str] = None
    meal_plan_id: Optional[str] = None
    id: Optional[str] = None

    def to_row(self, meal_plan_id: str) -> Dict:
        return {
            "meal_plan_id": meal_plan_id,
            "meal_type": self.meal_type,
            "name": self.name,
            "description": self.description,
            "calories": self.calories,
            "protein_grams": self.protein_grams,
            "carbs_grams": self.carbs_grams,
            "fats_grams": self.fats_grams,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "order_index": self.order_index
        }


@dataclass
class MealPlan:
    """Plano alimentar gerado para um cliente"""
    name: str
    description: str
    daily_calories: int
    protein_grams: int
    carbs_grams: int
    fats_grams: int
    meals: List[Meal] = field(default_factory=list)
    ai_generated: bool = True

    def to_row(self, client_id: str, trainer_id: str, is_active: bool) -> Dict:
        return {
            "client_id": client_id,
            "trainer_id": trainer_id,
            "name": self.name,
            "description": self.description,
            "daily_calories": self.daily_calories,
            "protein_grams": self.protein_grams,
            "carbs_grams": self.carbs_grams,
            "fats_grams": self.fats_grams,
            "ai_generated": self.ai_generated,
            "is_active": is_active
        }


# ===== TREINOS =====
@dataclass
class Exercise:
    """Exercício de um treino"""
    day_of_week: int  # 0 = domingo ... 6 = sábado
    exercise_name: str
    sets: int
    reps: Reps
    rest_seconds: int
    order_index: int
    notes: Optional[str] = None
    workout_id: Optional[str] = None
    id: Optional[str] = None

    def to_row(self, workout_id: str) -> Dict:
        return {
            "workout_id": workout_id,
            "day_of_week": self.day_of_week,
            "exercise_name": self.exercise_name,
            "sets": self.sets,
            "reps": self.reps.to_text(),
            "rest_seconds": self.rest_seconds,
            "notes": self.notes,
            "order_index": self.order_index
        }

    @classmethod
    def from_row(cls, row: Dict) -> "Exercise":
        return cls(
            day_of_week=row["day_of_week"],
            exercise_name=row["exercise_name"],
            sets=row["sets"],
            reps=parse_reps(row["reps"]),
            rest_seconds=row.get("rest_seconds", 0),
            order_index=row.get("order_index", 0),
            notes=row.get("notes"),
            workout_id=row.get("workout_id"),
            id=row.get("id")
        )


@dataclass
class Workout:
    """Plano de treino gerado para um cliente"""
    name: str
    description: str
    goal: str
    duration_weeks: int
    exercises: List[Exercise] = field(default_factory=list)
    ai_generated: bool = True

    @property
    def days(self) -> List[int]:
        """Dias da semana com exercícios, em ordem"""
        return sorted({exercise.day_of_week for exercise in self.exercises})

    def to_row(self, client_id: str, trainer_id: str, is_active: bool) -> Dict:
        return {
            "client_id": client_id,
            "trainer_id": trainer_id,
            "name": self.name,
            "description": self.description,
            "goal": self.goal,
            "duration_weeks": self.duration_weeks,
            "ai_generated": self.ai_generated,
            "is_active": is_active
        }
