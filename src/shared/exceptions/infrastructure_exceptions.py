"""
Infrastructure Exceptions

Исключения инфраструктурного слоя.
"""


class InfrastructureException(Exception):
    """Базовое исключение инфраструктуры."""
    pass


class DatabaseError(InfrastructureException):
    """Ошибка работы с БД."""
    pass


class StorageError(InfrastructureException):
    """Ошибка файлового хранилища (загрузка обложек)."""
    pass
