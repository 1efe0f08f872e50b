import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from starlette.middleware import Middleware

from steamvision.core.config import settings
from steamvision.core.logging import setup_logging
from .database import engine, Base, SessionLocal
from .routers import graphql
from .services.auth import CodeSweeper

logger = logging.getLogger("steamvision")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("Startup: database tables checked/created")
    sweeper = CodeSweeper(SessionLocal)
    sweeper.start()
    yield
    sweeper.stop()


middleware = [
    Middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS),
    Middleware(CORSMiddleware,
               allow_origins=settings.CORS_ORIGINS,
               allow_credentials=True,
               allow_methods=["*"],
               allow_headers=["*"]),

    Middleware(GZipMiddleware, minimum_size=1000)
]

app = FastAPI(
    title="SteamVision Api",
    description="Accounts and show catalogue for SteamVision",
    version="1.0.0",
    lifespan=lifespan,
    middleware=middleware
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-XSS-Protection"] = "1; mode=block"
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise
    process_time = time.time() - start
    response.headers["X-Process-Time"] = str(process_time)
    logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code,
                int(process_time * 1000))
    return response


app.include_router(graphql.router, tags=["GraphQL"])


@app.get("/")
def health_check():
    return {"status": "ok", "message": "Nice and Healthy"}
