import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from ..config import settings
from .errors import UnauthorizedError

logger = logging.getLogger("pos_api.security")


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(
        to_encode,
        secret_key or settings.SECRET_KEY,
        algorithm=algorithm or settings.ALGORITHM,
    )


class Authenticator:
    """Capacidad de autenticacion consultada antes de despachar cada ruta."""

    name = "base"

    def authenticate(self, request: Request) -> Optional[str]:
        raise NotImplementedError


class NoAuthentication(Authenticator):
    """Sin autenticacion configurada: toda peticion se acepta."""

    name = "none"

    def authenticate(self, request: Request) -> Optional[str]:
        return None


class TokenAuthentication(Authenticator):
    """Exige ``Authorization: Bearer <jwt>`` firmado con ``secret_key``."""

    name = "jwt"

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def authenticate(self, request: Request) -> Optional[str]:
        header = request.headers.get("Authorization") or ""
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise UnauthorizedError()
        try:
            payload = jwt.decode(token.strip(), self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            logger.info({"event": "auth.token_invalido", "path": request.url.path})
            raise UnauthorizedError() from exc

        subject = payload.get("sub")
        if not subject:
            raise UnauthorizedError()
        return subject


def build_authenticator(mode: Optional[str] = None) -> Authenticator:
    mode = (mode or settings.AUTH_MODE or "none").lower()
    if mode == "none":
        return NoAuthentication()
    if mode == "jwt":
        return TokenAuthentication(settings.SECRET_KEY, settings.ALGORITHM)
    raise ValueError(f"AUTH_MODE invalido: {mode}")
