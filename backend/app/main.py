# app/main.py
import importlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routers
from app.routes.admin_catalog import admin_blog_router, admin_products_router, admin_services_router
from app.routes.admin_users import admin_users_router
from app.routes.auth import auth_router
from app.routes.catalog import (
    admin_events_router,
    admin_news_router,
    blog_posts_router,
    events_router,
    news_router,
    products_router,
    services_router,
)
from app.routes.consultations import consultation_router
from app.routes.engagement import cart_router, favorites_router, reviews_router
from app.routes.orders import order_router
from app.routes.profile import profile_router
from app.routes.search import search_router
from app.routes.seed import seed_router

# Error Handlers
from sustainhub.core.config import settings
from sustainhub.core.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from sustainhub.core.log_config import setup_logging
from sustainhub.db.database import Database

logger = logging.getLogger("sustainhub")

MODEL_MODULES = (
    "user", "product", "order", "cart_item", "consultation",
    "blog_post", "service", "event", "news", "favorite", "review",
)


def import_models():
    """Register every table on the shared metadata."""
    for name in MODEL_MODULES:
        importlib.import_module(f"app.models.{name}")


# ------------------------
# DB lifecycle
# ------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    import_models()
    db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    await db.create_all()
    app.state.db = db
    logger.info("SustainHub API started")
    try:
        yield
    finally:
        await db.dispose()
        logger.info("Database connections closed")


def create_app() -> FastAPI:
    app = FastAPI(title="SustainHub API", version="1.0.0", lifespan=lifespan)

    # ------------------------
    # CORS
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------
    # Routes
    # ------------------------
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(admin_users_router, prefix="/api/admin/users")
    app.include_router(admin_products_router, prefix="/api/admin/products")
    app.include_router(admin_blog_router, prefix="/api/admin/blog")
    app.include_router(admin_services_router, prefix="/api/admin/services")
    app.include_router(admin_events_router, prefix="/api/admin/events")
    app.include_router(admin_news_router, prefix="/api/admin/news")
    app.include_router(products_router, prefix="/api/products")
    app.include_router(services_router, prefix="/api/services")
    app.include_router(blog_posts_router, prefix="/api/blog-posts")
    app.include_router(events_router, prefix="/api/events")
    app.include_router(news_router, prefix="/api/news")
    app.include_router(order_router, prefix="/api/orders")
    app.include_router(consultation_router, prefix="/api/consultations")
    app.include_router(profile_router, prefix="/api/profile")
    app.include_router(favorites_router, prefix="/api/favorites")
    app.include_router(reviews_router, prefix="/api/reviews")
    app.include_router(cart_router, prefix="/api/cart")
    app.include_router(search_router, prefix="/api")
    app.include_router(seed_router, prefix="/api/seed")

    # ------------------------
    # Exception handlers
    # ------------------------
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, generic_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ------------------------
    # Health & root
    # ------------------------
    @app.get("/")
    async def root():
        return {"message": "Welcome to SustainHub API"}

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()
