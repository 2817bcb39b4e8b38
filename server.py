"""
Ponto de entrada da API HTTP
"""
import logging
import uvicorn

from src.config import API_HOST, API_PORT, LOG_LEVEL, SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=LOG_LEVEL
)
logger = logging.getLogger(__name__)

def main():
    """Inicia a API"""
    if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
        logger.error("❌ SUPABASE_URL e SUPABASE_SERVICE_ROLE_KEY devem estar definidos no .env!")
        return

    logger.info(f"🚀 API em http://{API_HOST}:{API_PORT}")
    uvicorn.run("src.api.app:app", host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
