from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.core.logging_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers

from .models import users, workspaces, iam, categories, locations, item_types, items
from .router import (
    user_router,
    workspace_router,
    iam_router,
    category_router,
    location_router,
    type_router,
    item_router,
)

setup_logging(settings.LOG_LEVEL)

# Create all tables
Base.metadata.create_all(bind=engine)

# This MUST exist for uvicorn
app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(user_router.router)
app.include_router(workspace_router.router)
app.include_router(iam_router.router)
app.include_router(category_router.router)
app.include_router(location_router.router)
app.include_router(type_router.router)
app.include_router(item_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}
