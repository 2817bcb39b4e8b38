"""
Evolução do peso e registro de medições
"""
from typing import Dict
from telegram import Update
from telegram.ext import ContextTypes
from src.bot.handlers.start import NOT_LINKED_MESSAGE
from src.bot.keyboards.inline import InlineKeyboards
from src.bot.states import BotState
from src.database.models import Measurement
from src.utils.validators import DataValidator
import logging

logger = logging.getLogger(__name__)


def format_progress(summary: Dict) -> str:
    """Texto da evolução do peso"""
    if not summary:
        return "📈 Nenhuma medição registrada ainda.\n\nRegistre seu peso para acompanhar a evolução!"

    change = summary['weightChange']
    trend = "📉" if change < 0 else "📈" if change > 0 else "➖"
    sign = "+" if change > 0 else ""

    return f"""📈 SUA EVOLUÇÃO

⚖️ Peso inicial: {summary['firstWeight']} kg
⚖️ Peso atual: {summary['latestWeight']} kg
{trend} Variação: {sign}{change:.1f} kg ({sign}{summary['weightChangePercent']:.1f}%)
📋 Medições: {summary['count']}"""


async def progress_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Mostrar a evolução do peso"""
    query = update.callback_query
    await query.answer()

    client_id = context.user_data.get('client_id')
    if not client_id:
        await query.edit_message_text(NOT_LINKED_MESSAGE)
        return

    try:
        progress = await context.bot_data['clients'].get_progress(client_id)
    except Exception as e:
        logger.error(f"Erro ao carregar evolução do cliente {client_id}: {e}")
        await query.edit_message_text("❌ Não foi possível carregar a evolução. Tente novamente.",
                                      reply_markup=InlineKeyboards.back_to_menu())
        return

    await query.edit_message_text(
        text=format_progress(progress['summary']),
        reply_markup=InlineKeyboards.progress_actions()
    )


async def register_weight_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Iniciar o registro de uma medição"""
    query = update.callback_query
    await query.answer()

    if not context.user_data.get('client_id'):
        await query.edit_message_text(NOT_LINKED_MESSAGE)
        return

    context.user_data['state'] = BotState.MEASUREMENT_WEIGHT
    await query.edit_message_text("⚖️ REGISTRAR PESO\n\nInforme seu peso atual (em kg):")


async def handle_measurement_weight(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Tratamento do peso informado"""
    valid, weight, error = DataValidator.validate_weight(update.message.text)

    if not valid:
        await update.message.reply_text(f"❌ {error}\n\nTente novamente:")
        return

    context.user_data['measurement'] = {'weight': weight}
    context.user_data['state'] = BotState.MEASUREMENT_BODY_FAT

    await update.message.reply_text(
        "📐 Informe seu percentual de gordura corporal (ou pule esta etapa):",
        reply_markup=InlineKeyboards.skip_body_fat()
    )


async def handle_measurement_body_fat(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Tratamento do percentual de gordura informado"""
    valid, body_fat, error = DataValidator.validate_body_fat(update.message.text)

    if not valid:
        await update.message.reply_text(f"❌ {error}\n\nTente novamente:", reply_markup=InlineKeyboards.skip_body_fat())
        return

    context.user_data['measurement']['body_fat_percentage'] = body_fat
    await save_measurement(update.message, context)


async def skip_body_fat_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Gravar a medição sem o percentual de gordura"""
    query = update.callback_query
    await query.answer()

    if context.user_data.get('state') != BotState.MEASUREMENT_BODY_FAT or 'measurement' not in context.user_data:
        await query.edit_message_text("⚠️ Nenhuma medição em andamento.", reply_markup=InlineKeyboards.back_to_menu())
        return

    await save_measurement(query.message, context)


async def save_measurement(message, context: ContextTypes.DEFAULT_TYPE):
    """Gravar a medição coletada e mostrar a evolução atualizada"""
    client_id = context.user_data['client_id']
    data = context.user_data.pop('measurement')
    context.user_data['state'] = BotState.IDLE

    clients = context.bot_data['clients']
    try:
        await clients.record_measurement(Measurement(client_id=client_id, **data))
        progress = await clients.get_progress(client_id)
    except Exception as e:
        logger.error(f"Erro ao registrar medição do cliente {client_id}: {e}")
        await message.reply_text("❌ Não foi possível registrar a medição. Tente novamente.",
                                 reply_markup=InlineKeyboards.back_to_menu())
        return

    await message.reply_text(
        "✅ Medição registrada!\n\n" + format_progress(progress['summary']),
        reply_markup=InlineKeyboards.progress_actions()
    )
