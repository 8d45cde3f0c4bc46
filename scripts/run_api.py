"""Serve the JD-Filter HTTP API with uvicorn."""

import logging

import uvicorn

from jdfilter.api import create_app
from jdfilter.config import settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
