"""
Comando /start e menu principal
"""
from telegram import Update
from telegram.ext import ContextTypes
from src.bot.keyboards.inline import InlineKeyboards
from src.bot.states import BotState
from src.utils.validators import DataValidator
import logging

logger = logging.getLogger(__name__)

NOT_LINKED_MESSAGE = """🔗 Sua conta ainda não está vinculada.

Peça ao seu treinador o link de acesso e abra-o aqui no Telegram."""

async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """
    Comando /start

    O link enviado pelo treinador abre o bot com /start <id do cliente>.
    """
    user = update.effective_user

    if context.args:
        valid, client_id, error = DataValidator.validate_client_id(context.args[0])
        if not valid:
            await update.message.reply_text(f"❌ {error}")
            return

        db = context.bot_data['db']
        client = await db.get_client(client_id)
        if not client:
            await update.message.reply_text("❌ Cliente não encontrado. Confira o link com seu treinador.")
            return

        context.user_data['client_id'] = client_id
        logger.info(f"Usuário {user.id} vinculado ao cliente {client_id}")

    if not context.user_data.get('client_id'):
        await update.message.reply_text(NOT_LINKED_MESSAGE)
        return

    context.user_data['state'] = BotState.IDLE

    await update.message.reply_text(
        "💪 Olá! Aqui você acompanha o treino e a dieta montados pelo seu treinador.\n\nEscolha uma opção:",
        reply_markup=InlineKeyboards.main_menu()
    )

async def main_menu_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Volta ao menu principal"""
    query = update.callback_query
    await query.answer()

    context.user_data['state'] = BotState.IDLE
    context.user_data.pop('measurement', None)

    await query.edit_message_text(
        text="🏠 Menu principal\n\nEscolha uma opção:",
        reply_markup=InlineKeyboards.main_menu()
    )

async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Comando /help"""
    help_text = """ℹ️ AJUDA

🏋️ Meu treino - exercícios do treino ativo, por dia da semana
🥗 Minha dieta - calorias, macros e refeições do plano ativo
📈 Minha evolução - variação do peso desde a primeira medição
⚖️ Registrar peso - nova medição de peso (e gordura corporal)

/start - menu principal
/help - esta ajuda
"""

    if update.message:
        await update.message.reply_text(help_text, reply_markup=InlineKeyboards.back_to_menu())
    else:
        query = update.callback_query
        await query.answer()
        await query.edit_message_text(text=help_text, reply_markup=InlineKeyboards.back_to_menu())
