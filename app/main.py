# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import channels, likes, playlists, users, videos
from app.core.config import settings
from app.core.errors import ApiError
from app.core.redis_client import lifespan
from app.schemas.common import ApiResponse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, lifespan=lifespan)


def envelope(status_code: int, message: str, data=None, headers=None) -> JSONResponse:
    body = ApiResponse(status_code=status_code, data=data, message=message)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
        headers=headers,
    )


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return envelope(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed query/path parameters are client errors: 400, not FastAPI's 422
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return envelope(400, f"Invalid request parameters: {problems}")


@app.get("/healthcheck", response_model=ApiResponse[str])
async def healthcheck():
    return ApiResponse(status_code=200, data="OK", message="Service is Healthy")


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(likes.router, prefix="", tags=["likes"])
app.include_router(videos.router, prefix="/videos", tags=["videos"])
app.include_router(channels.router, prefix="/channels", tags=["channels"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(playlists.router, prefix="/playlists", tags=["playlists"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
