"""
VenueEngine Main Application
============================

FastAPI entry point exposing the venue geometry and recommendation core.

The service is stateless: every request is answered by a pure function
call. Interactive editing sessions live in the client.

Endpoints:
    GET  /                     - Service information
    GET  /health               - Liveness probe
    GET  /geometry/ring-pack   - Ring radii for a layer count
    GET  /layouts/grid         - Rectangular grid venue map
    GET  /layouts/circular     - Ring/section venue map
    POST /recommendations      - Ranked crowd recommendations
"""

import logging
import os
import time
from typing import List, Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from venue_engine.config import settings
from venue_engine.editor import CircularLayoutEditor, GridLayoutEditor, clamp
from venue_engine.geometry.regions import polygon_area
from venue_engine.geometry.shapes import compute_ring_pack
from venue_engine.models.geometry import VenueMapDocument
from venue_engine.models.simulation import SimulationSnapshot
from venue_engine.recommendations import evaluate_snapshot


logger = logging.getLogger(__name__)


_startup_time: float = time.time()


# =============================================================================
# Helpers
# =============================================================================

def _document_payload(document: VenueMapDocument) -> dict:
    """Document in interchange form plus a small area summary."""
    payload = document.model_dump(mode="json", by_alias=True, exclude_none=True)
    payload["summary"] = {
        "total_area": round(sum(polygon_area(z.points) for z in document.zones), 4),
        "viewport_area": settings.viewport.width * settings.viewport.height,
    }
    return payload


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="VenueEngine",
    description="Venue zone geometry and crowd recommendation service",
    version=settings.service.version,
)


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "VenueEngine",
        "version": settings.service.version,
        "name": settings.service.name,
        "status": "running",
        "viewport": settings.viewport.model_dump(),
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?

    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
    })


@app.get("/geometry/ring-pack")
async def ring_pack(layers: int = 2) -> JSONResponse:
    """Ring layout for a (clamped) layer count."""
    limits = settings.limits
    layers = clamp(layers, limits.layers_min, limits.layers_max)
    cfg = settings.ring_pack
    pack = compute_ring_pack(
        layers,
        cfg.void_ratio,
        cfg.gap,
        settings.viewport.width,
        settings.viewport.height,
        cfg.margin,
        cfg.min_void,
    )
    return JSONResponse({"layers": layers, **pack.to_dict()})


@app.get("/layouts/grid")
async def grid_layout(
    rows: int = settings.editor.default_rows,
    cols: int = settings.editor.default_cols,
) -> JSONResponse:
    """Rectangular grid map; rows and cols are clamped, never rejected."""
    editor = GridLayoutEditor(
        rows=rows,
        cols=cols,
        inset=settings.editor.grid_inset,
        limits=settings.limits,
        viewport_width=settings.viewport.width,
        viewport_height=settings.viewport.height,
    )
    return JSONResponse(_document_payload(editor.to_document()))


@app.get("/layouts/circular")
async def circular_layout(
    layers: int = settings.editor.default_layers,
    sections: Optional[List[int]] = Query(default=None),
) -> JSONResponse:
    """Ring/section map; ``sections`` lists per-layer counts, innermost first."""
    cfg = settings.ring_pack
    editor = CircularLayoutEditor(
        layers=layers,
        limits=settings.limits,
        void_ratio=cfg.void_ratio,
        gap=cfg.gap,
        margin=cfg.margin,
        min_void=cfg.min_void,
        angular_gap=cfg.angular_gap,
        sector_steps=cfg.sector_steps,
        viewport_width=settings.viewport.width,
        viewport_height=settings.viewport.height,
    )
    for index, count in enumerate(sections or []):
        if index >= editor.layers:
            break
        editor.set_sections(index, count)
    return JSONResponse(_document_payload(editor.to_document()))


@app.post("/recommendations")
async def recommendations(
    snapshot: SimulationSnapshot,
    location: Optional[str] = None,
) -> JSONResponse:
    """Ranked recommendations for a simulation snapshot."""
    recs = evaluate_snapshot(snapshot, location)
    logger.info(
        f"Recommendations served: samples={len(snapshot.crowd_density)}, "
        f"hotspots={len(snapshot.hotspots)}, count={len(recs)}"
    )
    return JSONResponse([r.model_dump(mode="json", exclude_none=True) for r in recs])


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    # Cloud Run uses PORT env var
    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "venue_engine.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
