import pytest

from src.database.models import Measurement
from src.services.client_service import ClientService, progress_summary
from src.utils.errors import NotFoundError, StorageError

NEW_CLIENT = {
    "trainer_id": "trainer-1",
    "email": "ana@example.com",
    "password": "segredo123",
    "full_name": "Ana Souza",
    "height": 165,
    "current_weight": 62,
    "goal_weight": None,
    "fitness_goal": "lose_weight",
    "activity_level": "light",
    "gender": "female",
    "date_of_birth": "",
    "medical_conditions": None,
    "dietary_restrictions": "lactose"
}


@pytest.mark.asyncio
async def test_add_client_creates_account_profile_and_client(fake_db):
    user_id = await ClientService(fake_db).add_client(dict(NEW_CLIENT))

    assert fake_db.auth_users == {user_id: "ana@example.com"}
    assert fake_db.tables["profiles"][user_id]["role"] == "client"
    [client] = fake_db.rows("clients", user_id=user_id)
    assert client["trainer_id"] == "trainer-1"
    assert client["date_of_birth"] is None
    assert client["dietary_restrictions"] == "lactose"


@pytest.mark.asyncio
@pytest.mark.parametrize("failing", ["create_profile", "create_client"])
async def test_add_client_removes_account_on_failure(fake_db, failing):
    fake_db.fail_on.add(failing)

    with pytest.raises(StorageError):
        await ClientService(fake_db).add_client(dict(NEW_CLIENT))

    assert fake_db.auth_users == {}
    assert "delete_auth_user" in fake_db.calls


@pytest.mark.asyncio
async def test_add_client_account_failure_stops_early(fake_db):
    fake_db.fail_on.add("create_auth_user")

    with pytest.raises(StorageError):
        await ClientService(fake_db).add_client(dict(NEW_CLIENT))

    assert "create_profile" not in fake_db.calls


@pytest.mark.asyncio
async def test_record_measurement_updates_current_weight(fake_db, client_row):
    service = ClientService(fake_db)
    saved = await service.record_measurement(Measurement(client_id=client_row["id"], weight=78.4, waist=84))

    assert saved["weight"] == 78.4
    assert fake_db.tables["clients"][client_row["id"]]["current_weight"] == 78.4


@pytest.mark.asyncio
async def test_record_measurement_unknown_client(fake_db):
    with pytest.raises(NotFoundError):
        await ClientService(fake_db).record_measurement(Measurement(client_id="missing", weight=70))


@pytest.mark.asyncio
async def test_progress(fake_db, client_row):
    service = ClientService(fake_db)
    for weight in (80, 79.2, 77.5):
        await service.record_measurement(Measurement(client_id=client_row["id"], weight=weight))

    progress = await service.get_progress(client_row["id"])

    assert [m["weight"] for m in progress["measurements"]] == [80, 79.2, 77.5]
    assert progress["summary"] == {
        "count": 3,
        "firstWeight": 80,
        "latestWeight": 77.5,
        "weightChange": -2.5,
        "weightChangePercent": -3.1
    }


def test_progress_summary_empty():
    assert progress_summary([]) == {}


def test_progress_summary_single_measurement():
    summary = progress_summary([{"weight": 70}])
    assert summary["weightChange"] == 0
    assert summary["weightChangePercent"] == 0
