from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from api.schemas import DashboardResponse, ThemeModel
from core.config import DATA_PATH, DashboardConfig, configure_logging, load_config
from core.data import load
from core.state import LoadState
from core.theme import JsonFileThemeStore, ThemePreference, ThemeStore, read_theme, write_theme
from core.view_model import build_dashboard_payload

config = load_config()
configure_logging(config.log_level)

app = FastAPI(title="Accident Risk Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_config() -> DashboardConfig:
    return config


def get_loader() -> Callable[[str], LoadState]:
    return load


def get_theme_store(cfg: DashboardConfig = Depends(get_config)) -> ThemeStore:
    return JsonFileThemeStore(cfg.prefs_path)


def _json(data: object, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(data))


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


@app.get(DATA_PATH)
def dashboard_data(cfg: DashboardConfig = Depends(get_config)):
    if not cfg.data_file.is_file():
        logger.warning("dashboard data file missing: %s", cfg.data_file)
        return JSONResponse(status_code=404, content={"error": f"{cfg.data_file.name} not found", "type": "FileNotFoundError"})
    return FileResponse(cfg.data_file, media_type="application/json")


@app.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    cfg: DashboardConfig = Depends(get_config),
    loader: Callable[[str], LoadState] = Depends(get_loader),
    store: ThemeStore = Depends(get_theme_store),
):
    try:
        state = loader(cfg.source)
        return _json(build_dashboard_payload(state, read_theme(store)))
    except Exception as exc:
        logger.exception("dashboard failed")
        return _error(exc)


@app.get("/theme", response_model=ThemeModel)
def get_theme(store: ThemeStore = Depends(get_theme_store)):
    return _json({"theme": read_theme(store).value})


@app.put("/theme", response_model=ThemeModel)
def put_theme(body: ThemeModel, store: ThemeStore = Depends(get_theme_store)):
    theme = ThemePreference(body.theme)
    write_theme(store, theme)
    return _json({"theme": theme.value})


@app.post("/theme/toggle", response_model=ThemeModel)
def toggle_theme(store: ThemeStore = Depends(get_theme_store)):
    theme = read_theme(store).flipped()
    write_theme(store, theme)
    return _json({"theme": theme.value})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="127.0.0.1", port=8000)
