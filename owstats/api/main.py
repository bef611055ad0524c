"""
FastAPI wrapper: https://.../api/{platform}/{region}/{tag}/profile and friends
"""
import logging
import os

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from owstats.career import engine
from owstats.career.errors import FetchError, InvalidParameterError, NotFoundError
from owstats.career.models import Achievement, HeroBreakdown, Profile, SearchResult, Stat
from owstats.career.player import Player

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Overwatch Career Stats")


# ── 1.  Path validation ─────────────────────────────────────────────
def player_params(platform: str, region: str, tag: str) -> Player:
    return Player.from_path(platform, region, tag).validate()


def player_mode_params(platform: str, region: str, tag: str, mode: str) -> Player:
    # one pass so every bad parameter is reported together
    return Player.from_path(platform, region, tag).validate(mode)


# ── 2.  Error mapping ───────────────────────────────────────────────
@app.exception_handler(InvalidParameterError)
async def invalid_parameter(request: Request, exc: InvalidParameterError):
    return JSONResponse(status_code=400, content={"errors": exc.errors})


@app.exception_handler(NotFoundError)
async def not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(FetchError)
async def fetch_failed(request: Request, exc: FetchError):
    logger.error("Upstream fetch failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


# ── 3.  API routes ──────────────────────────────────────────────────
@app.get("/")
def home():
    return "API is online"


@app.get("/api/search/{tag}", response_model=list[SearchResult], response_model_exclude_none=True)
def search(tag: str):
    return engine.search(tag)


@app.get(
    "/api/{platform}/{region}/{tag}/profile",
    response_model=Profile,
    response_model_exclude_none=True,
)
def profile(player: Player = Depends(player_params)):
    return engine.get_profile(player)


@app.get("/api/{platform}/{region}/{tag}/achievements", response_model=list[Achievement])
def achievements(player: Player = Depends(player_params)):
    return engine.get_achievements(player)


@app.get("/api/{platform}/{region}/{tag}/{mode}/all-hero-stats", response_model=list[Stat])
def all_hero_stats(mode: str, player: Player = Depends(player_mode_params)):
    return engine.get_all_hero_stats(player, mode)


@app.get(
    "/api/{platform}/{region}/{tag}/{mode}/heroes-breakdown",
    response_model=dict[str, list[HeroBreakdown]],
)
@app.get(
    "/api/{platform}/{region}/{tag}/{mode}/heros-breakdown",
    response_model=dict[str, list[HeroBreakdown]],
    include_in_schema=False,
)
def heroes_breakdown(
    mode: str,
    stat: str | None = Query(None, description="Only this comparison stat, e.g. 'Time Played'"),
    player: Player = Depends(player_mode_params),
):
    return engine.get_heroes_breakdown(player, mode, stat)


@app.get("/api/{platform}/{region}/{tag}/{mode}/hero/{name}", response_model=list[Stat])
def hero_stats(mode: str, name: str, player: Player = Depends(player_mode_params)):
    return engine.get_hero_stats(player, mode, name)


# ── 4.  CORS ────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── 5.  Local dev entry-point ───────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "owstats.api.main:app",  # dotted path from repo root
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=True,
    )
