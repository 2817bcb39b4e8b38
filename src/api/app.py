"""
Aplicação FastAPI
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from src.api.routes import router
from src.config import CORS_HEADERS
from src.utils.errors import CoachError, NotFoundError

logger = logging.getLogger(__name__)

app = FastAPI(title="Coach API")
app.include_router(router)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    # Preflight de qualquer rota responde 200 sem chegar ao roteador
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception(f"Erro inesperado em {request.method} {request.url.path}")
        response = JSONResponse(status_code=400, content={"error": str(e)})

    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(CoachError)
async def coach_error_handler(request: Request, exc: CoachError):
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    logger.error(f"{request.method} {request.url.path} falhou: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    message = "; ".join(messages) or "Requisição inválida"
    logger.warning(f"{request.method} {request.url.path} inválido: {message}")
    return JSONResponse(status_code=400, content={"error": message})
