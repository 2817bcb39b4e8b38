"""
Exceções da aplicação
"""


class CoachError(Exception):
    """Erro base da aplicação"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(CoachError):
    """Falha de leitura ou escrita no Supabase"""


class NotFoundError(CoachError):
    """Registro obrigatório não encontrado"""
