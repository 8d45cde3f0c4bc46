# jdfilter/api/app.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jdfilter.api.routes import router
from jdfilter.config import ExtractorSettings, settings as default_settings
from jdfilter.fetch import BasePageFetcher, build_fetcher
from jdfilter.lexicon import TechLexicon, build_lexicon_store
from jdfilter.service import JobExtractionService

logger = logging.getLogger("JobApi")


def create_app(
    settings: Optional[ExtractorSettings] = None,
    lexicon: Optional[TechLexicon] = None,
    fetcher: Optional[BasePageFetcher] = None,
) -> FastAPI:
    """
    Build the API application.

    The lexicon and fetcher default to the ones selected by settings; tests
    inject their own.
    """
    if settings is None:
        settings = default_settings
    if lexicon is None:
        lexicon = TechLexicon(build_lexicon_store(settings))
    if fetcher is None:
        fetcher = build_fetcher(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.lexicon.load()
        logger.info(f"JD-Filter API ready (fetch mode: {app.state.service.fetcher.name})")
        yield

    app = FastAPI(title="JD-Filter API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.lexicon = lexicon
    app.state.service = JobExtractionService(fetcher, lexicon)
    app.include_router(router)
    return app
