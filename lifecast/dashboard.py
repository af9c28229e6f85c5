"""Weather life index API: FastAPI backend serving grid and index lookups."""

import os
from functools import lru_cache

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from lifecast.config.loader import load_config
from lifecast.forecast.aggregator import ParseError
from lifecast.grid.projection import to_grid
from lifecast.ingest.kma_client import KmaApiError
from lifecast.models.reporting import LookupResult
from lifecast.pipeline.lookup_pipeline import LookupPipeline
from lifecast.reporting.formatters import format_share_summary, result_to_dict

CONFIG_ENV = "LIFECAST_CONFIG"

app = FastAPI(title="Weather Life Indices", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_pipeline() -> LookupPipeline:
    """One pipeline per process, so the forecast cache is shared by requests."""
    return LookupPipeline(load_config(os.environ.get(CONFIG_ENV)))


def _lookup(pipeline: LookupPipeline, lat: float, lon: float, name: str) -> LookupResult:
    try:
        return pipeline.run(lat, lon, name)
    except ParseError as e:
        raise HTTPException(status_code=422, detail=f"Unreadable forecast: {e}")
    except (KmaApiError, httpx.HTTPError) as e:
        raise HTTPException(status_code=502, detail=f"Forecast service error: {e}")


# ── Data endpoints ──────────────────────────────────────────────


@app.get("/api/grid")
def get_grid(
    lat: float = Query(...),
    lon: float = Query(...),
    pipeline: LookupPipeline = Depends(get_pipeline),
):
    """Forecast grid cell for a coordinate."""
    cell = to_grid(pipeline.params, lat, lon)
    return {"lat": lat, "lon": lon, "nx": cell.x, "ny": cell.y}


@app.get("/api/cities")
def get_cities(pipeline: LookupPipeline = Depends(get_pipeline)):
    """Known cities with their pre-resolved grid cells."""
    return [
        {
            "name": c.name, "slug": c.slug,
            "lat": c.latitude, "lon": c.longitude,
            "nx": c.grid_x, "ny": c.grid_y,
        }
        for c in pipeline.config.cities
    ]


@app.get("/api/indices")
def get_indices(
    lat: float = Query(...),
    lon: float = Query(...),
    name: str = "",
    pipeline: LookupPipeline = Depends(get_pipeline),
):
    """Current conditions, forecast summary and all life indices."""
    return result_to_dict(_lookup(pipeline, lat, lon, name))


@app.get("/api/share")
def get_share(
    lat: float = Query(...),
    lon: float = Query(...),
    name: str = "",
    pipeline: LookupPipeline = Depends(get_pipeline),
):
    """Shareable text with the top three indices."""
    return {"text": format_share_summary(_lookup(pipeline, lat, lon, name))}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
