"""
Ponto de entrada do bot do Telegram para clientes
"""
import logging
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    filters,
    ContextTypes
)

# Serviços
from src.services.supabase_service import SupabaseService
from src.services.plan_service import PlanService
from src.services.client_service import ClientService
from src.database.queries import DatabaseQueries
from src.config import SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY, TELEGRAM_BOT_TOKEN, LOG_LEVEL

# Handlers
from src.bot.handlers.start import start_command, main_menu_callback, help_command
from src.bot.handlers.plans import workout_callback, workout_day_callback, meal_plan_callback
from src.bot.handlers.progress import (
    progress_callback,
    register_weight_callback,
    handle_measurement_weight,
    handle_measurement_body_fat,
    skip_body_fat_callback
)
from src.bot.states import BotState

# Logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=LOG_LEVEL
)
logger = logging.getLogger(__name__)

async def route_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Direciona mensagens de texto de acordo com o estado"""
    state = context.user_data.get('state', BotState.IDLE)

    if state == BotState.MEASUREMENT_WEIGHT:
        await handle_measurement_weight(update, context)
    elif state == BotState.MEASUREMENT_BODY_FAT:
        await handle_measurement_body_fat(update, context)
    else:
        await help_command(update, context)

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Tratamento global de erros"""
    logger.error(f"Update {update} causou o erro {context.error}")

    if isinstance(update, Update) and update.effective_message:
        await update.effective_message.reply_text(
            "❌ Ocorreu um erro. Tente novamente ou envie /start"
        )

def main():
    """Inicia o bot"""
    logger.info("🚀 Iniciando o bot...")

    if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
        logger.error("❌ SUPABASE_URL e SUPABASE_SERVICE_ROLE_KEY devem estar definidos no .env!")
        return

    if not TELEGRAM_BOT_TOKEN:
        logger.error("❌ TELEGRAM_BOT_TOKEN não encontrado!")
        return

    supabase_service = SupabaseService(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)
    db_queries = DatabaseQueries(supabase_service.get_client())

    application = Application.builder().token(TELEGRAM_BOT_TOKEN).build()

    # Serviços disponíveis nos handlers
    application.bot_data['db'] = db_queries
    application.bot_data['plans'] = PlanService(db_queries)
    application.bot_data['clients'] = ClientService(db_queries)

    # Comandos
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))

    # Menu
    application.add_handler(CallbackQueryHandler(main_menu_callback, pattern="^main_menu$"))
    application.add_handler(CallbackQueryHandler(help_command, pattern="^help$"))

    # Treino e dieta
    application.add_handler(CallbackQueryHandler(workout_callback, pattern="^workout$"))
    application.add_handler(CallbackQueryHandler(workout_day_callback, pattern="^workout_day_[0-6]$"))
    application.add_handler(CallbackQueryHandler(meal_plan_callback, pattern="^meal_plan$"))

    # Evolução
    application.add_handler(CallbackQueryHandler(progress_callback, pattern="^progress$"))
    application.add_handler(CallbackQueryHandler(register_weight_callback, pattern="^register_weight$"))
    application.add_handler(CallbackQueryHandler(skip_body_fat_callback, pattern="^skip_body_fat$"))

    # Mensagens de texto
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, route_text_message))

    application.add_error_handler(error_handler)

    logger.info("✅ Bot iniciado e pronto!")
    application.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == "__main__":
    main()
