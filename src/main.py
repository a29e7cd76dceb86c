from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import settings
from src.categories.router import router as categories_router
from src.database import init_db
from src.exceptions import TranslationNotFound
from src.locales import PATH_TRANSLATIONS, LocaleMiddleware, PathTranslator, get_registry
from src.locales.router import router as locales_router
from src.logging_config import setup_logging, get_logger
from src.pages.router import build_pages_router
from src.posts.router import router as posts_router
from src.redis.client import redis_client
from src.routing import LOGICAL_ROUTES, build_route_table

# Initialize logging
setup_logging(settings.LOG_LEVEL.upper())
logger = get_logger(__name__)

# Locale registry and route table are built once; a ConfigurationError aborts startup
registry = get_registry()
route_table = build_route_table(LOGICAL_ROUTES, registry, PathTranslator(PATH_TRANSLATIONS))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database and Redis on application startup."""
    await init_db()
    
    # Connect to Redis
    await redis_client.connect()
    
    yield
    
    # Cleanup on shutdown
    await redis_client.disconnect()


app = FastAPI(
    title="Localized Routes API",
    description="Locale-prefixed routes and translatable categories and posts",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.registry = registry
app.state.route_table = route_table

app.add_middleware(LocaleMiddleware, registry=registry)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TranslationNotFound)
async def translation_not_found_handler(request: Request, exc: TranslationNotFound):
    logger.info("No content for %r in '%s'", exc.entity_id, exc.locale)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.get("/health")
def health_check():
    return {"status": "ok"}


# Include routers
app.include_router(locales_router)
app.include_router(categories_router)
app.include_router(posts_router)
app.include_router(build_pages_router(route_table))
