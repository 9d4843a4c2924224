import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from newsbrief_core import NewsClient, ProviderError
from newsbrief_api.deps import get_news_client, read_json_body
from newsbrief_api.schemas import ErrorResponse, SearchFailureResponse, SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

NO_RESULT = "No result returned."

router = APIRouter(prefix="/api", tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": SearchFailureResponse}},
)
async def search(request: Request, client: NewsClient = Depends(get_news_client)):
    try:
        req = SearchRequest.model_validate(await read_json_body(request))
    except (ValueError, ValidationError):
        return JSONResponse({"error": "Invalid request body."}, status_code=400)

    try:
        text = await run_in_threadpool(client.search, req.topic)
    except ProviderError as e:
        logger.exception("Search failed for topic=%r", req.topic)
        return JSONResponse({"error": "Search failed", "detail": str(e)}, status_code=500)

    return SearchResponse(result=text or NO_RESULT)
