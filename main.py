import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from database.db import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# quieter HTTP client / multipart loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("multipart").setLevel(logging.WARNING)


# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ routers
from routers import calculations, examiners, reports, subjects


@asynccontextmanager
async def lifespan(app: FastAPI):
    # tables are created on startup (idempotent)
    init_db()
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# ✅ CORS (browser front-end)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ request latency (X-Latency-Ms response header + access log)
app.add_middleware(TimingMiddleware)

# ✅ global error handlers (uniform JSON error envelope)
add_error_handlers(app)

# ✅ /v1 routers
app.include_router(examiners.router,    prefix="/v1")
app.include_router(subjects.router,     prefix="/v1")
app.include_router(calculations.router, prefix="/v1")
app.include_router(reports.router,      prefix="/v1")


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


# ✅ root
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - examiner remuneration management"}
