"""Application factory for the todo & reminders API."""
import logging
import secrets
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from todoapp.middleware.ratelimit import RateLimitMiddleware, make_key_func
from todoapp.middleware.timeout import make_timeout_middleware
from todoapp.config import Settings, settings as default_settings
from todoapp.db.session import make_engine, make_session_factory, init_db
from todoapp.errors import AppError, AuthError
from todoapp.logging_config import configure_logging
from todoapp.auth.routes import router as auth_router
from todoapp.auth.service import ensure_admin
from todoapp.todos.routes import router as todos_router
from todoapp.reminders.routes import router as reminders_router
from todoapp.stores.sql import SqlUserStore

logger = logging.getLogger(__name__)

def _with_secret(settings: Settings) -> Settings:
    if settings.secret_key:
        return settings
    if settings.app_env != "dev":
        raise RuntimeError("SECRET_KEY must be set when APP_ENV is not 'dev'")
    logger.warning("SECRET_KEY not set; using a random key, tokens will not survive a restart")
    return settings.model_copy(update={"secret_key": secrets.token_urlsafe(32)})

async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)

async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0]
    field = ".".join(str(p) for p in first["loc"] if p != "body")
    return JSONResponse(status_code=400, content={"detail": f"{field}: {first['msg']}"})

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)
    settings = _with_secret(settings)

    engine = make_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        logger.info("started %s (env=%s, db=%s)", settings.app_name, settings.app_env, engine.url.get_backend_name())
        if settings.admin_email and settings.admin_password:
            db = app.state.session_factory()
            try:
                ensure_admin(SqlUserStore(db), settings.admin_email, settings.admin_password, settings.admin_name)
            finally:
                db.close()
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RateLimitMiddleware,
        window_seconds=settings.rate_limit_window_seconds,
        max_calls=settings.rate_limit_max_calls,
        key_func=make_key_func(settings.secret_key),
    )
    app.middleware("http")(make_timeout_middleware(settings.request_timeout_seconds))

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(auth_router)
    app.include_router(todos_router)
    app.include_router(reminders_router)

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
