import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import dimensions_router, info_router, orders_router, preview_router
from config import settings

logger = logging.getLogger("crate-orders")

app = FastAPI(title="Crate Order API")

allow_origins = settings.allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(info_router)
app.include_router(dimensions_router)
app.include_router(preview_router)
app.include_router(orders_router)


@app.on_event("startup")
async def _on_startup() -> None:
    if allow_origins == ["*"]:
        logger.warning(
            "CORS is set to allow all origins with credentials; set ALLOWED_ORIGINS to explicit values for production."
        )
    if not settings.smtp_host:
        logger.warning("SMTP_HOST is not set; order emails will fail until it is configured.")


@app.middleware("http")
async def log_preflight(request, call_next):
    if request.method == "OPTIONS":
        origin = request.headers.get("origin", "")
        logger.info("CORS preflight %s %s origin=%s", request.method, request.url.path, origin)
    response = await call_next(request)
    return response
