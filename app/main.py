import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Config
from app.database import build_engine, build_sessionmaker, init_db
from app.errors import ServiceError
from app.routes import auth, arms, formmasters, students, school, assessment, signatures

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

origins = Config.CORS_ORIGINS or [
    Config.FRONTEND_URL,
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

def create_app(database_url: str = None, migrate: bool = None, seed: bool = None) -> FastAPI:
    """
    Builds the API. The engine (and its connection pool) lives on app.state for the
    lifetime of the process and is disposed on shutdown.
    """
    run_migrate = Config.AUTO_MIGRATE if migrate is None else migrate
    run_seed = Config.SEED_DEFAULTS if seed is None else seed

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: pool + schema, before any request is served
        engine = build_engine(database_url)
        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)
        if run_migrate:
            await init_db(engine, seed=run_seed)
        logger.info("E-Result API ready")
        yield
        # Shutdown
        await engine.dispose()
        logger.info("Database pool closed")

    app = FastAPI(title="E-Result Backend", version="1.0.0", lifespan=lifespan)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())})

    # Global Exception Handler so unexpected failures keep the {"error": ...} shape
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logging.error(f"Global Exception: {exc}", exc_info=True)
        content = {"error": "Internal server error"}
        if Config.ENV == "DEVELOPMENT":
            content["message"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(arms.router, prefix="/api/arms", tags=["Class Arms"])
    app.include_router(formmasters.router, prefix="/api/formmasters", tags=["Form Masters"])
    app.include_router(students.router, prefix="/api/students", tags=["Students"])
    app.include_router(school.router, prefix="/api/school", tags=["School"])
    app.include_router(assessment.router, prefix="/api/assessment", tags=["Assessment"])
    app.include_router(signatures.router, prefix="/api/signatures", tags=["Signatures"])

    @app.get("/api/health")
    def health():
        return {"status": "OK", "message": "E-Result System API is running"}

    return app

# Default app instance for uvicorn
app = create_app()
