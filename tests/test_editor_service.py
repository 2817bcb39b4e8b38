import pytest

from src.database.models import ClientProfile
from src.services.editor_service import EditorService, meal_totals
from src.services.plan_service import PlanService
from src.utils.errors import CoachError, NotFoundError

CLIENT = ClientProfile(height=180, weight=80, gender="male", activity_level="moderate", fitness_goal="maintain")


@pytest.mark.asyncio
async def test_meal_plan_edit_order_of_operations(fake_db):
    await PlanService(fake_db).create_meal_plan("client-1", "trainer-1", CLIENT)
    plan = await PlanService(fake_db).get_active_meal_plan("client-1")
    meals = plan["meals"]
    fake_db.calls.clear()

    kept = [dict(meals[0], name="Café Reforçado"), *meals[1:4]]
    new_meal = {"meal_type": "snack", "name": "Ceia", "calories": 150, "protein_grams": 10,
                "carbs_grams": 15, "fats_grams": 5, "ingredients": "- 1 iogurte", "order_index": 4}

    saved = await EditorService(fake_db).save_meal_plan(
        "client-1",
        plan_data={"name": "Plano Ajustado"},
        meals=kept + [new_meal],
        deleted_ids=[meals[4]["id"]]
    )

    mutations = [c for c in fake_db.calls if c.startswith(("delete", "update", "insert"))]
    assert mutations[0] == "delete_meals"
    assert mutations[-1] == "update_meal_plan"
    assert mutations.count("update_meal") == 4
    assert mutations.count("insert_meal") == 1

    stored = fake_db.rows("meals", meal_plan_id=plan["id"])
    assert meals[4]["id"] not in {m["id"] for m in stored}
    assert {m["name"] for m in stored} >= {"Café Reforçado", "Ceia"}
    assert saved["name"] == "Plano Ajustado"
    assert saved["updated_at"]
    assert saved["daily_calories"] == plan["daily_calories"]


@pytest.mark.asyncio
async def test_meal_plan_recalculate_totals(fake_db):
    await PlanService(fake_db).create_meal_plan("client-1", "trainer-1", CLIENT)
    plan = await PlanService(fake_db).get_active_meal_plan("client-1")

    saved = await EditorService(fake_db).save_meal_plan(
        "client-1", plan_data={}, meals=plan["meals"], recalculate_totals=True
    )

    assert saved["daily_calories"] == sum(m["calories"] for m in plan["meals"])
    assert saved["protein_grams"] == sum(m["protein_grams"] for m in plan["meals"])


@pytest.mark.asyncio
async def test_workout_edit(fake_db):
    await PlanService(fake_db).create_workout("client-1", "trainer-1", CLIENT)
    workout = await PlanService(fake_db).get_active_workout("client-1")
    exercises = workout["exercises"]

    edited = dict(exercises[0], sets=5, reps="30  MIN")
    added = {"day_of_week": 6, "exercise_name": "Caminhada", "sets": 1, "reps": "40 min",
             "rest_seconds": 0, "order_index": 0}

    saved = await EditorService(fake_db).save_workout(
        "client-1",
        workout_data={"duration_weeks": 8},
        exercises=[edited, added],
        deleted_ids=[exercises[1]["id"]]
    )

    assert saved["duration_weeks"] == 8
    stored = {e["id"]: e for e in fake_db.rows("exercises", workout_id=workout["id"])}
    assert exercises[1]["id"] not in stored
    assert stored[exercises[0]["id"]]["sets"] == 5
    assert stored[exercises[0]["id"]]["reps"] == "30 min"
    assert any(e["exercise_name"] == "Caminhada" and e["day_of_week"] == 6 for e in stored.values())


@pytest.mark.asyncio
async def test_edit_without_active_plan(fake_db):
    editor = EditorService(fake_db)
    with pytest.raises(NotFoundError):
        await editor.save_meal_plan("client-1", plan_data={}, meals=[])
    with pytest.raises(NotFoundError):
        await editor.save_workout("client-1", workout_data={}, exercises=[])


def test_meal_totals_ignores_missing_values():
    totals = meal_totals([
        {"calories": 100, "protein_grams": 10, "carbs_grams": None, "fats_grams": 2},
        {"calories": 50}
    ])
    assert totals == {"daily_calories": 150, "protein_grams": 10, "carbs_grams": 0, "fats_grams": 2}


@pytest.mark.asyncio
async def test_meals_of_another_plan_are_rejected(fake_db):
    service = PlanService(fake_db)
    await service.create_meal_plan("client-1", "trainer-1", CLIENT)
    await service.create_meal_plan("client-2", "trainer-1", CLIENT)
    other_meals = (await service.get_active_meal_plan("client-2"))["meals"]
    editor = EditorService(fake_db)

    with pytest.raises(NotFoundError):
        await editor.save_meal_plan("client-1", plan_data={}, meals=[dict(other_meals[0], name="Alterada")])
    with pytest.raises(NotFoundError):
        await editor.save_meal_plan("client-1", plan_data={}, meals=[], deleted_ids=[other_meals[1]["id"]])

    stored = (await service.get_active_meal_plan("client-2"))["meals"]
    assert stored == other_meals
    assert "delete_meals" not in fake_db.calls
    assert "update_meal" not in fake_db.calls


@pytest.mark.asyncio
async def test_exercises_of_another_workout_are_rejected(fake_db):
    service = PlanService(fake_db)
    await service.create_workout("client-1", "trainer-1", CLIENT)
    await service.create_workout("client-2", "trainer-1", CLIENT)
    other = (await service.get_active_workout("client-2"))["exercises"]
    editor = EditorService(fake_db)

    with pytest.raises(NotFoundError):
        await editor.save_workout("client-1", workout_data={}, exercises=[dict(other[0], sets=9)])
    with pytest.raises(NotFoundError):
        await editor.save_workout("client-1", workout_data={}, exercises=[], deleted_ids=[other[1]["id"]])

    assert len(fake_db.rows("exercises", workout_id=other[0]["workout_id"])) == len(other)
    assert fake_db.tables["exercises"][other[0]["id"]]["sets"] == other[0]["sets"]


@pytest.mark.asyncio
async def test_new_meal_cannot_take_used_order(fake_db):
    await PlanService(fake_db).create_meal_plan("client-1", "trainer-1", CLIENT)
    new_meal = {"meal_type": "snack", "name": "Ceia", "order_index": 0}

    with pytest.raises(CoachError):
        await EditorService(fake_db).save_meal_plan("client-1", plan_data={}, meals=[new_meal])

    assert not fake_db.rows("meals", name="Ceia")


@pytest.mark.asyncio
async def test_order_freed_in_same_save_can_be_reused(fake_db):
    await PlanService(fake_db).create_meal_plan("client-1", "trainer-1", CLIENT)
    plan = await PlanService(fake_db).get_active_meal_plan("client-1")
    breakfast = plan["meals"][0]
    new_meal = {"meal_type": "breakfast", "name": "Panqueca", "order_index": breakfast["order_index"]}

    await EditorService(fake_db).save_meal_plan(
        "client-1", plan_data={}, meals=[new_meal], deleted_ids=[breakfast["id"]]
    )

    orders = [m["order_index"] for m in fake_db.rows("meals", meal_plan_id=plan["id"])]
    assert sorted(orders) == [0, 1, 2, 3, 4]


@pytest.mark.asyncio
async def test_new_exercise_cannot_take_used_slot(fake_db):
    await PlanService(fake_db).create_workout("client-1", "trainer-1", CLIENT)
    added = {"day_of_week": 1, "exercise_name": "Remada", "sets": 3, "reps": "10-12",
             "rest_seconds": 60, "order_index": 0}

    with pytest.raises(CoachError):
        await EditorService(fake_db).save_workout("client-1", workout_data={}, exercises=[added])

    added["day_of_week"] = 0
    await EditorService(fake_db).save_workout("client-1", workout_data={}, exercises=[added])
    assert fake_db.rows("exercises", exercise_name="Remada", day_of_week=0)


@pytest.mark.asyncio
async def test_reps_keep_typed_unit(fake_db):
    await PlanService(fake_db).create_workout("client-1", "trainer-1", CLIENT)
    exercise = (await PlanService(fake_db).get_active_workout("client-1"))["exercises"][0]

    await EditorService(fake_db).save_workout(
        "client-1", workout_data={}, exercises=[dict(exercise, reps="60 seg")]
    )

    assert fake_db.tables["exercises"][exercise["id"]]["reps"] == "60 seg"
