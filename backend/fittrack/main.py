import logging
import sys
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from fittrack.api.errors import register_exception_handlers
from fittrack.api.routes import auth, fitness_profile, health_metrics, hiking, notifications, progress, workouts

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logging.getLogger("fittrack").setLevel(logging.DEBUG)
from fittrack.config import settings
from fittrack.db.session import init_db
from fittrack.services.reminders import run_workout_reminder_job
from prometheus_client import make_asgi_app

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_production_config()
    await init_db()
    if settings.enable_scheduler:
        hour = settings.reminder_cron_hour if 0 <= settings.reminder_cron_hour <= 23 else 7
        scheduler.add_job(run_workout_reminder_job, "cron", hour=hour, minute=0)
        scheduler.start()
        logger.info("Workout reminder job scheduled daily at %02d:00", hour)
    yield
    if scheduler.running:
        scheduler.shutdown()


limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])

app = FastAPI(
    title="FitTrack API",
    description="Personal fitness tracking: profile, workouts, health metrics, hiking, progress",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.limiter = limiter
register_exception_handlers(app)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=500)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if getattr(settings, "enable_hsts", False):
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()] if settings.cors_origins else ["*"]
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(fitness_profile.router)
api_router.include_router(workouts.router)
api_router.include_router(health_metrics.router)
api_router.include_router(hiking.router)
api_router.include_router(notifications.router)
api_router.include_router(progress.router)
app.include_router(api_router)

metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)


@app.get("/health")
@limiter.exempt
def health(request: Request):
    return {"status": "ok"}
