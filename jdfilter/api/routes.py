# jdfilter/api/routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from jdfilter.errors import FetchError, InvalidLexiconError, InvalidUrlError, LexiconStoreError
from jdfilter.lexicon.tech_lexicon import TechLexicon
from jdfilter.service import JobExtractionService

logger = logging.getLogger("JobApi")

router = APIRouter(prefix="/api")

INVALID_URL_MESSAGE = 'Please provide a valid job URL via the "url" query parameter.'
FETCH_FAILED_MESSAGE = "Unable to fetch job data at the moment."


class TechStacksPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tech_stacks: List[str] = Field(default_factory=list, alias="techStacks")


def get_service(request: Request) -> JobExtractionService:
    return request.app.state.service


def get_lexicon(request: Request) -> TechLexicon:
    return request.app.state.lexicon


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/job")
async def get_job(
    url: Optional[str] = Query(None, description="Job posting URL"),
    service: JobExtractionService = Depends(get_service),
):
    try:
        descriptor = await service.extract_url(url)
    except InvalidUrlError:
        return JSONResponse(status_code=400, content={"message": INVALID_URL_MESSAGE})
    except FetchError as e:
        logger.error(f"Failed to load job data: {e}")
        return JSONResponse(status_code=500, content={"message": FETCH_FAILED_MESSAGE})
    except Exception as e:
        logger.error(f"Failed to load job data: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": FETCH_FAILED_MESSAGE})

    return descriptor.to_payload()


@router.get("/tech-stacks")
async def get_tech_stacks(lexicon: TechLexicon = Depends(get_lexicon)):
    return {"techStacks": list(lexicon.snapshot())}


@router.put("/tech-stacks")
def replace_tech_stacks(
    payload: TechStacksPayload,
    lexicon: TechLexicon = Depends(get_lexicon),
):
    try:
        stored = lexicon.replace(payload.tech_stacks)
    except InvalidLexiconError as e:
        return JSONResponse(status_code=400, content={"message": str(e)})
    except LexiconStoreError as e:
        logger.error(f"Failed to save tech stacks: {e}")
        return JSONResponse(status_code=500, content={"message": "Unable to save tech stacks."})

    return {"techStacks": list(stored)}
