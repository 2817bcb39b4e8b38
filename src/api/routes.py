"""
Rotas da API: geração de planos, editores, clientes e medições
"""
from functools import lru_cache

from fastapi import APIRouter, Depends

from src.api.schemas import (
    AddClientRequest,
    GenerateRequest,
    MealPlanEditRequest,
    MeasurementRequest,
    WorkoutEditRequest
)
from src.config import SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL
from src.database.models import ClientProfile, Measurement
from src.database.queries import DatabaseQueries
from src.services.client_service import ClientService
from src.services.editor_service import EditorService
from src.services.plan_service import PlanService
from src.services.supabase_service import SupabaseService
from src.utils.errors import StorageError

router = APIRouter()


@lru_cache
def get_db() -> DatabaseQueries:
    if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
        raise StorageError("SUPABASE_URL e SUPABASE_SERVICE_ROLE_KEY não configurados")
    return DatabaseQueries(SupabaseService(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY).get_client())


def get_plan_service(db=Depends(get_db)) -> PlanService:
    return PlanService(db)


def get_editor_service(db=Depends(get_db)) -> EditorService:
    return EditorService(db)


def get_client_service(db=Depends(get_db)) -> ClientService:
    return ClientService(db)


def _client_profile(request: GenerateRequest) -> ClientProfile:
    data = request.client_data
    return ClientProfile(
        height=data.height,
        weight=data.weight,
        goal_weight=data.goal_weight,
        gender=data.gender,
        activity_level=data.activity_level,
        fitness_goal=data.fitness_goal,
        dietary_restrictions=data.dietary_restrictions
    )


# --- GERAÇÃO ---
@router.post("/generate-meal-plan")
async def generate_meal_plan(request: GenerateRequest, service: PlanService = Depends(get_plan_service)):
    """Gerar e gravar o plano alimentar do cliente."""
    meal_plan = await service.create_meal_plan(request.client_id, request.trainer_id, _client_profile(request))
    return {"success": True, "mealPlan": meal_plan}


@router.post("/generate-workout")
async def generate_workout(request: GenerateRequest, service: PlanService = Depends(get_plan_service)):
    """Gerar e gravar o treino do cliente."""
    workout = await service.create_workout(request.client_id, request.trainer_id, _client_profile(request))
    return {"success": True, "workout": workout}


# --- CLIENTES ---
@router.post("/add-client")
async def add_client(request: AddClientRequest, service: ClientService = Depends(get_client_service)):
    """Cadastrar um cliente do treinador (conta, perfil e dados corporais)."""
    user_id = await service.add_client(request.model_dump())
    return {"success": True, "userId": user_id}


@router.post("/clients/{client_id}/measurements")
async def add_measurement(
    client_id: str,
    request: MeasurementRequest,
    service: ClientService = Depends(get_client_service)
):
    measurement = await service.record_measurement(Measurement(client_id=client_id, **request.model_dump()))
    return {"success": True, "measurement": measurement}


@router.get("/clients/{client_id}/progress")
async def get_progress(client_id: str, service: ClientService = Depends(get_client_service)):
    return await service.get_progress(client_id)


# --- PLANOS ATIVOS E EDITORES ---
@router.get("/clients/{client_id}/meal-plan")
async def get_meal_plan(client_id: str, service: PlanService = Depends(get_plan_service)):
    """Plano alimentar ativo com as refeições; mealPlan nulo quando não há plano."""
    return {"mealPlan": await service.get_active_meal_plan(client_id)}


@router.put("/clients/{client_id}/meal-plan")
async def save_meal_plan(
    client_id: str,
    request: MealPlanEditRequest,
    service: EditorService = Depends(get_editor_service)
):
    """Salvar as edições do plano alimentar ativo."""
    meal_plan = await service.save_meal_plan(
        client_id,
        plan_data=request.model_dump(exclude_unset=True, exclude={"meals", "deleted_ids", "recalculate_totals"}),
        meals=[meal.model_dump() for meal in request.meals],
        deleted_ids=request.deleted_ids,
        recalculate_totals=request.recalculate_totals
    )
    return {"success": True, "mealPlan": meal_plan}


@router.get("/clients/{client_id}/workout")
async def get_workout(client_id: str, service: PlanService = Depends(get_plan_service)):
    """Treino ativo com os exercícios; workout nulo quando não há treino."""
    return {"workout": await service.get_active_workout(client_id)}


@router.put("/clients/{client_id}/workout")
async def save_workout(
    client_id: str,
    request: WorkoutEditRequest,
    service: EditorService = Depends(get_editor_service)
):
    """Salvar as edições do treino ativo."""
    workout = await service.save_workout(
        client_id,
        workout_data=request.model_dump(exclude_unset=True, exclude={"exercises", "deleted_ids"}),
        exercises=[exercise.model_dump() for exercise in request.exercises],
        deleted_ids=request.deleted_ids
    )
    return {"success": True, "workout": workout}
