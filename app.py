"""
WorkGraph FastAPI Application

A REST API server for the WorkGraph reference engine.
Provides endpoints for smart references, suggestions, reference maps,
reference paths and ASCII visualization.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from workgraph import __version__
from workgraph.config import Config
from workgraph.core.item_store import ItemStoreFactory
from workgraph.models import (
    ContextualSuggestion,
    EnhancedWorkState,
    ReferenceMap,
    SimilarityScore,
    SmartReference,
)
from workgraph.services.work_graph import WorkGraph
from workgraph.utils.exceptions import ItemNotFoundError
from workgraph.utils.logger import get_logger, setup_logging

# Global service instance
service: WorkGraph | None = None
logger = get_logger(__name__)


class PathResponse(BaseModel):
    """Response model for reference path lookup."""

    source_id: str
    target_id: str
    path: list[str]
    found: bool


class VisualizationResponse(BaseModel):
    """Response model for ASCII visualization."""

    visualization: str


class RefreshResponse(BaseModel):
    """Response model for a reference refresh."""

    item_id: str
    reference_count: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service_initialized: bool
    store_backend: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global service

    config = Config.from_env()

    setup_logging(config.logging)

    logger.info("Starting WorkGraph server")
    logger.info(f"Configuration: store={config.store_backend} data_dir={config.store.data_dir}")

    item_store = ItemStoreFactory.create(config)
    service = WorkGraph(item_store=item_store, config=config)
    app.state.config = config
    logger.info("WorkGraph service initialized")

    yield

    logger.info("Shutting down WorkGraph server")
    service = None


app = FastAPI(
    title="WorkGraph API",
    description="Automatic references and relationship graphs between work items",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_service() -> WorkGraph:
    if not service:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return service


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    config: Config | None = getattr(app.state, "config", None)
    return HealthResponse(
        status="healthy" if service else "initializing",
        service_initialized=service is not None,
        store_backend=config.store_backend if config else "unknown",
    )


# Suggestion endpoints
@app.get("/suggestions", response_model=list[ContextualSuggestion])
def get_contextual_suggestions():
    """
    Smart suggestions for current active work based on historical context.

    Ordered by priority (high, medium, low), then confidence.
    """
    graph = get_service()
    try:
        return graph.get_contextual_suggestions()
    except Exception as e:
        logger.error(f"Error getting contextual suggestions: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.get("/work-state", response_model=EnhancedWorkState)
def get_enhanced_work_state():
    """Active work items with suggestions grouped by type."""
    graph = get_service()
    try:
        return graph.get_enhanced_work_state()
    except Exception as e:
        logger.error(f"Error getting enhanced work state: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


# Reference endpoints
@app.post("/items/{item_id}/references", response_model=list[SmartReference])
def generate_smart_references(item_id: str):
    """
    Generate automatic references for a work item without storing them.
    """
    graph = get_service()
    try:
        if graph.item_store.find_item(item_id) is None:
            raise ItemNotFoundError(item_id)
        return graph.generate_smart_references(item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    except Exception as e:
        logger.error(f"Error generating smart references: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.post("/items/{item_id}/refresh", response_model=RefreshResponse)
def refresh_references(item_id: str):
    """
    Regenerate and store references for a changed active item.

    Other active items similar to it receive a cross-reference.
    """
    graph = get_service()
    try:
        if not any(item.id == item_id for item in graph.item_store.load_active_items()):
            raise ItemNotFoundError(item_id, active_only=True)

        graph.update_references_on_change(item_id)
        item = graph.item_store.find_item(item_id)
        return RefreshResponse(
            item_id=item_id,
            reference_count=len(item.metadata.smart_references) if item else 0,
        )
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    except Exception as e:
        logger.error(f"Error refreshing references: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.get("/similarity", response_model=SimilarityScore)
def calculate_similarity(item_id_1: str = Query(...), item_id_2: str = Query(...)):
    """Similarity score between two work items."""
    graph = get_service()
    try:
        similarity = graph.calculate_similarity(item_id_1, item_id_2)
    except Exception as e:
        logger.error(f"Error calculating similarity: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    if similarity is None:
        raise HTTPException(status_code=404, detail="One or both work items not found")
    return similarity


# Graph endpoints
@app.get("/map", response_model=ReferenceMap)
def generate_reference_map():
    """Reference map of all active work and the items it references."""
    graph = get_service()
    try:
        return graph.generate_reference_map()
    except Exception as e:
        logger.error(f"Error generating reference map: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.get("/map/{item_id}", response_model=ReferenceMap)
def generate_focused_map(item_id: str, depth: int = Query(default=2, ge=1, le=5)):
    """Reference map around one work item, expanded up to ``depth`` levels."""
    graph = get_service()
    try:
        return graph.generate_focused_map(item_id, depth)
    except Exception as e:
        logger.error(f"Error generating focused reference map: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.get("/path", response_model=PathResponse)
def find_reference_path(source_id: str = Query(...), target_id: str = Query(...)):
    """Directed reference path between two work items."""
    graph = get_service()
    try:
        path = graph.find_reference_path(source_id, target_id)
    except Exception as e:
        logger.error(f"Error finding reference path: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return PathResponse(source_id=source_id, target_id=target_id, path=path, found=bool(path))


@app.get("/visualization", response_model=VisualizationResponse)
def visualize_references():
    """ASCII visualization of work item references."""
    graph = get_service()
    try:
        return VisualizationResponse(visualization=graph.visualize_references())
    except Exception as e:
        logger.error(f"Error generating visualization: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


# Root endpoint
@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": "WorkGraph API",
        "version": __version__,
        "description": "Automatic references and relationship graphs between work items",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=8000, reload=True, log_level="info")
