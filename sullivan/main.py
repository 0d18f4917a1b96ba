"""FastAPI app factory."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sullivan import __version__
from sullivan.config import configure_logging, settings

load_dotenv()


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Sullivan",
        description="Procedural architectural ornament: parametric generators rendered to SVG",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Importing the routers pulls in the pipeline, which registers the built-in generators.
    from sullivan.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
