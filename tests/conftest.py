"""
Fixtures dos testes: repositório em memória no lugar do Supabase
"""
import itertools
from typing import Dict, List, Optional
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.routes import get_db
from src.utils.errors import StorageError


class FakeQueries:
    """Implementa a interface de DatabaseQueries sobre dicionários"""

    def __init__(self):
        self.tables: Dict[str, Dict[str, Dict]] = {
            "clients": {}, "profiles": {}, "meal_plans": {}, "meals": {},
            "workouts": {}, "exercises": {}, "measurements": {}
        }
        self.auth_users: Dict[str, str] = {}
        self.calls: List[str] = []
        self.fail_on = set()
        self.fail_with: Dict[str, Exception] = {}
        self._clock = itertools.count(1)

    def _check(self, name: str):
        self.calls.append(name)
        if name in self.fail_with:
            raise self.fail_with[name]
        if name in self.fail_on:
            raise StorageError(f"falha simulada em {name}")

    def _insert(self, table: str, row: Dict) -> Dict:
        stored = {"id": str(uuid4()), **row, "created_at": f"2026-01-01T00:00:{next(self._clock):05d}"}
        self.tables[table][stored["id"]] = stored
        return dict(stored)

    def _update(self, table: str, row_id: str, data: Dict) -> Dict:
        if row_id not in self.tables[table]:
            return {}
        self.tables[table][row_id].update(data)
        return dict(self.tables[table][row_id])

    def _active(self, table: str, client_id: str) -> Optional[Dict]:
        rows = [r for r in self.tables[table].values() if r["client_id"] == client_id and r["is_active"]]
        rows.sort(key=lambda r: r["created_at"], reverse=True)
        return dict(rows[0]) if rows else None

    def rows(self, table: str, **filters) -> List[Dict]:
        return [r for r in self.tables[table].values() if all(r.get(k) == v for k, v in filters.items())]

    # clientes
    async def get_client(self, client_id):
        self._check("get_client")
        row = self.tables["clients"].get(client_id)
        return dict(row) if row else None

    async def update_client(self, client_id, client_data):
        self._check("update_client")
        return self._update("clients", client_id, client_data)

    async def create_client(self, client_data):
        self._check("create_client")
        return self._insert("clients", client_data)

    async def create_profile(self, profile_data):
        self._check("create_profile")
        row = {**profile_data, "created_at": "2026-01-01T00:00:00"}
        self.tables["profiles"][profile_data["id"]] = row
        return row

    async def create_auth_user(self, email, password):
        self._check("create_auth_user")
        user_id = str(uuid4())
        self.auth_users[user_id] = email
        return user_id

    async def delete_auth_user(self, user_id):
        self._check("delete_auth_user")
        self.auth_users.pop(user_id, None)

    # planos alimentares
    async def insert_meal_plan(self, plan_data):
        self._check("insert_meal_plan")
        return self._insert("meal_plans", plan_data)

    async def insert_meals(self, meals_data):
        self._check("insert_meals")
        return [self._insert("meals", row) for row in meals_data]

    async def find_active_meal_plan(self, client_id):
        self._check("find_active_meal_plan")
        return self._active("meal_plans", client_id)

    async def get_meals(self, meal_plan_id):
        self._check("get_meals")
        return sorted(self.rows("meals", meal_plan_id=meal_plan_id), key=lambda r: r["order_index"])

    async def update_meal_plan(self, meal_plan_id, plan_data):
        self._check("update_meal_plan")
        return self._update("meal_plans", meal_plan_id, plan_data)

    async def deactivate_meal_plans(self, client_id, keep_id=None):
        self._check("deactivate_meal_plans")
        for row in self.rows("meal_plans", client_id=client_id, is_active=True):
            if row["id"] != keep_id:
                row["is_active"] = False

    async def delete_meal_plan(self, meal_plan_id):
        self._check("delete_meal_plan")
        self.tables["meal_plans"].pop(meal_plan_id, None)
        for row in self.rows("meals", meal_plan_id=meal_plan_id):
            self.tables["meals"].pop(row["id"])

    async def insert_meal(self, meal_data):
        self._check("insert_meal")
        return self._insert("meals", meal_data)

    async def update_meal(self, meal_plan_id, meal_id, meal_data):
        self._check("update_meal")
        if self.tables["meals"].get(meal_id, {}).get("meal_plan_id") != meal_plan_id:
            return {}
        return self._update("meals", meal_id, meal_data)

    async def delete_meals(self, meal_plan_id, meal_ids):
        self._check("delete_meals")
        for row in self.rows("meals", meal_plan_id=meal_plan_id):
            if row["id"] in meal_ids:
                self.tables["meals"].pop(row["id"])

    # treinos
    async def insert_workout(self, workout_data):
        self._check("insert_workout")
        return self._insert("workouts", workout_data)

    async def insert_exercises(self, exercises_data):
        self._check("insert_exercises")
        return [self._insert("exercises", row) for row in exercises_data]

    async def find_active_workout(self, client_id):
        self._check("find_active_workout")
        return self._active("workouts", client_id)

    async def get_exercises(self, workout_id):
        self._check("get_exercises")
        return sorted(self.rows("exercises", workout_id=workout_id),
                      key=lambda r: (r["day_of_week"], r["order_index"]))

    async def update_workout(self, workout_id, workout_data):
        self._check("update_workout")
        return self._update("workouts", workout_id, workout_data)

    async def deactivate_workouts(self, client_id, keep_id=None):
        self._check("deactivate_workouts")
        for row in self.rows("workouts", client_id=client_id, is_active=True):
            if row["id"] != keep_id:
                row["is_active"] = False

    async def delete_workout(self, workout_id):
        self._check("delete_workout")
        self.tables["workouts"].pop(workout_id, None)
        for row in self.rows("exercises", workout_id=workout_id):
            self.tables["exercises"].pop(row["id"])

    async def insert_exercise(self, exercise_data):
        self._check("insert_exercise")
        return self._insert("exercises", exercise_data)

    async def update_exercise(self, workout_id, exercise_id, exercise_data):
        self._check("update_exercise")
        if self.tables["exercises"].get(exercise_id, {}).get("workout_id") != workout_id:
            return {}
        return self._update("exercises", exercise_id, exercise_data)

    async def delete_exercises(self, workout_id, exercise_ids):
        self._check("delete_exercises")
        for row in self.rows("exercises", workout_id=workout_id):
            if row["id"] in exercise_ids:
                self.tables["exercises"].pop(row["id"])

    # medições
    async def insert_measurement(self, measurement_data):
        self._check("insert_measurement")
        row = dict(measurement_data)
        row.setdefault("measured_at", f"2026-01-01T00:00:{next(self._clock):05d}")
        return self._insert("measurements", row)

    async def get_measurements(self, client_id):
        self._check("get_measurements")
        return sorted(self.rows("measurements", client_id=client_id), key=lambda r: r["measured_at"])


@pytest.fixture
def fake_db():
    return FakeQueries()


@pytest.fixture
def client_row(fake_db):
    return fake_db._insert("clients", {
        "trainer_id": "trainer-1",
        "height": 180,
        "current_weight": 80,
        "gender": "male",
        "activity_level": "moderate",
        "fitness_goal": "maintain"
    })


@pytest.fixture
def api(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def generate_payload():
    return {
        "clientId": "client-1",
        "trainerId": "trainer-1",
        "clientData": {
            "height": 180,
            "weight": 80,
            "goalWeight": 75,
            "fitnessGoal": "maintain",
            "activityLevel": "moderate",
            "gender": "male",
            "dietaryRestrictions": None
        }
    }
