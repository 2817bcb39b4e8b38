"""
Serviço de conexão com o Supabase
"""
from supabase import create_client, Client
import logging

logger = logging.getLogger(__name__)


class SupabaseService:
    """Serviço de conexão com o Supabase"""

    def __init__(self, url: str, service_role_key: str):
        """
        Inicialização do cliente Supabase

        Usa a chave service role: a criação de contas de clientes
        (auth.admin) exige privilégios administrativos.
        """
        self.client: Client = create_client(url, service_role_key)
        logger.info("Cliente Supabase inicializado")

    def get_client(self) -> Client:
        """Obter o cliente Supabase"""
        return self.client
