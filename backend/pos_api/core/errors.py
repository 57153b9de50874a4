"""Errores de dominio que la API traduce a ``{"error": mensaje}``."""
from typing import Optional


class PosError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(PosError):
    status_code = 400


class UnauthorizedError(PosError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(PosError):
    status_code = 404


class ConflictError(PosError):
    status_code = 409

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UnexpectedError(PosError):
    status_code = 500
