import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .core.errors import PosError
from .core.init_db import init_db
from .core.log_config import setup_logging
from .core.security import Authenticator, NoAuthentication, build_authenticator
from .routers import productos, ventas

logger = logging.getLogger("pos_api")

MSG_RUTA_NO_ENCONTRADA = "Ruta no encontrada"
MSG_DATOS_INVALIDOS = "Datos inválidos"
MSG_ERROR_INTERNO = "Error interno del servidor"


def _cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
    }


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return MSG_DATOS_INVALIDOS
    first = errors[0]
    campo = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detalle = first.get("msg", "")
    return f"{MSG_DATOS_INVALIDOS}: {campo}: {detalle}" if campo else f"{MSG_DATOS_INVALIDOS}: {detalle}"


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PosError)
    async def pos_error_handler(request: Request, exc: PosError):
        if exc.status_code >= 500:
            logger.error({"event": "request.error", "path": request.url.path, "error": exc.message})
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse({"error": _describe_validation(exc)}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Metodo no soportado en una ruta conocida tambien es "ruta no encontrada".
        if exc.status_code in (404, 405):
            return JSONResponse({"error": MSG_RUTA_NO_ENCONTRADA}, status_code=404)
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


def create_app(authenticator: Optional[Authenticator] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)
    authenticator = authenticator or build_authenticator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.AUTO_CREATE_TABLES:
            init_db()
        yield

    # Sin redireccion de "/productos/" a "/productos": toda ruta desconocida es 404.
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan, redirect_slashes=False)
    app.state.authenticator = authenticator
    if isinstance(authenticator, NoAuthentication):
        logger.warning({"event": "auth.deshabilitada", "modo": authenticator.name})
    else:
        logger.info({"event": "auth.habilitada", "modo": authenticator.name})

    @app.middleware("http")
    async def envelope_middleware(request: Request, call_next):
        # Preflight: responde antes de autenticar o despachar.
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=_cors_headers())

        try:
            response = await call_next(request)
        except Exception:
            error_id = uuid.uuid4().hex[:12]
            logger.exception(
                {
                    "event": "request.error_inesperado",
                    "error_id": error_id,
                    "method": request.method,
                    "path": request.url.path,
                }
            )
            response = JSONResponse({"error": MSG_ERROR_INTERNO, "error_id": error_id}, status_code=500)

        response.headers.update(_cors_headers())
        return response

    _register_exception_handlers(app)

    app.include_router(productos.router)
    app.include_router(ventas.router)
    return app


app = create_app()
