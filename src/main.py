from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.config import settings
from src.database import Database
from src.exceptions import register_exception_handlers
from src.logger import logger, setup_logging
from src.seed import seed_database
from src.auth import router as auth_router
from src.trains import router as trains_router
from src.bookings import router as bookings_router
from src.admin import router as admin_router


def init_database(database: Database, seed: bool = True) -> None:
    """Create the schema and seed reference data; failures are fatal"""
    try:
        database.create_all()
        if seed:
            db = database.session()
            try:
                seed_database(db)
            finally:
                db.close()
    except Exception:
        logger.exception("Database initialisation failed")
        database.dispose()
        raise


def create_app(database_url: str = None, seed: bool = None) -> FastAPI:
    setup_logging()
    database_url = database_url or settings.database_url
    seed = settings.SEED_ON_STARTUP if seed is None else seed

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(database_url)
        init_database(database, seed=seed)
        app.state.database = database
        logger.info(f"{settings.PROJECT_NAME} started")
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Train ticket booking API",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(
        auth_router.router,
        prefix=settings.API_PREFIX,
        tags=["Authentication"]
    )

    app.include_router(
        trains_router.router,
        prefix=f"{settings.API_PREFIX}/trains",
        tags=["Trains"]
    )

    app.include_router(
        bookings_router,
        prefix=f"{settings.API_PREFIX}/tickets",
        tags=["Tickets"]
    )

    app.include_router(
        admin_router.router,
        prefix=f"{settings.API_PREFIX}/admin",
        tags=["Admin"]
    )

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
