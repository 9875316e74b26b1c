from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import config
from ..api.routes import ranges


def create_app() -> FastAPI:
    logging.basicConfig(level=config.log_level())
    app = FastAPI(title="Range Picker API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(ranges.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "rangepicker"}

    return app


app = create_app()
