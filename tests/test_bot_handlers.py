from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.bot.handlers.progress import skip_body_fat_callback
from src.bot.handlers.start import main_menu_callback
from src.bot.states import BotState


def callback_update():
    query = MagicMock()
    query.answer = AsyncMock()
    query.edit_message_text = AsyncMock()
    query.message.reply_text = AsyncMock()
    return SimpleNamespace(callback_query=query)


def bot_context(user_data):
    clients = MagicMock()
    clients.record_measurement = AsyncMock()
    clients.get_progress = AsyncMock(return_value={"summary": {}, "measurements": []})
    return SimpleNamespace(user_data=user_data, bot_data={"clients": clients})


@pytest.mark.asyncio
async def test_skip_body_fat_saves_pending_weight():
    update = callback_update()
    context = bot_context({
        "client_id": "client-1",
        "state": BotState.MEASUREMENT_BODY_FAT,
        "measurement": {"weight": 79.5}
    })

    await skip_body_fat_callback(update, context)

    measurement = context.bot_data["clients"].record_measurement.call_args.args[0]
    assert measurement.client_id == "client-1"
    assert measurement.weight == 79.5
    assert measurement.body_fat_percentage is None
    assert context.user_data["state"] == BotState.IDLE


@pytest.mark.asyncio
async def test_skip_after_leaving_to_menu_saves_nothing():
    context = bot_context({
        "client_id": "client-1",
        "state": BotState.MEASUREMENT_BODY_FAT,
        "measurement": {"weight": 79.5}
    })

    await main_menu_callback(callback_update(), context)
    assert "measurement" not in context.user_data

    update = callback_update()
    await skip_body_fat_callback(update, context)

    context.bot_data["clients"].record_measurement.assert_not_called()
    assert "Nenhuma medição" in update.callback_query.edit_message_text.call_args.args[0]


@pytest.mark.asyncio
async def test_skip_in_other_state_saves_nothing():
    context = bot_context({
        "client_id": "client-1",
        "state": BotState.IDLE,
        "measurement": {"weight": 79.5}
    })

    await skip_body_fat_callback(callback_update(), context)

    context.bot_data["clients"].record_measurement.assert_not_called()
