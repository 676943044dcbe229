from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.middleware.trustedhost import TrustedHostMiddleware
from dotenv import load_dotenv
from api.schedule import router as schedule_router
from api.healthcheck import router as healthcheck_router
from utils.logger import logger
import os
import secrets
import time

load_dotenv()


def _csv_env(name: str):
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


# env
API_KEY = os.getenv("API_KEY")
ENABLE_CORS = os.getenv("ENABLE_CORS") == "true"
CORS_ALLOW_ORIGINS = _csv_env("CORS_ALLOW_ORIGINS")
ALLOWED_HOSTS = _csv_env("ALLOWED_HOSTS") or ["*"]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "0"))  # 0 = no limit

API_KEY_HEADER = "x-api-key"
HEALTH_PATH = "/api/health/check"

# reachable without the API key
PUBLIC_EXACT = {"/openapi.json", "/redoc", "/docs", HEALTH_PATH}
PUBLIC_PREFIXES = ("/docs/", HEALTH_PATH)

app = FastAPI(
    title="Ward Roster API",
    description="Generate and check hospital ward rosters.",
    version="0.1.0",
)

if ENABLE_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)


def _is_public(path: str) -> bool:
    return path in PUBLIC_EXACT or path.startswith(PUBLIC_PREFIXES)


# middlewares run in reverse registration order: auth, then body size, then timing
@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.perf_counter()
    response = await call_next(request)
    if not _is_public(request.url.path):
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({time.perf_counter() - t0:.2f}s)"
        )
    return response


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    if MAX_BODY_BYTES > 0:
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > MAX_BODY_BYTES:
            logger.warning(f"⛔ Rejected {request.url.path}: body of {length} bytes")
            return JSONResponse(status_code=413, content={"detail": "Payload too large"})
    return await call_next(request)


@app.middleware("http")
async def api_key_guard(request: Request, call_next):
    if request.method == "OPTIONS" or _is_public(request.url.path):
        return await call_next(request)

    if not API_KEY:
        logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
        return await call_next(request)

    client_key = request.headers.get(API_KEY_HEADER)
    if not client_key or not secrets.compare_digest(str(client_key), str(API_KEY)):
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})

    return await call_next(request)


def custom_openapi():
    """Document the API key header on every route except the health check."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})["ApiKeyAuth"] = {
        "type": "apiKey",
        "in": "header",
        "name": API_KEY_HEADER,
        "description": "Enter your API key",
    }

    for path, methods in schema.get("paths", {}).items():
        security = [] if path == HEALTH_PATH else [{"ApiKeyAuth": []}]
        for op in methods.values():
            op.setdefault("security", security)

    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi

app.include_router(schedule_router, prefix="/api")
app.include_router(healthcheck_router, prefix="/api")
