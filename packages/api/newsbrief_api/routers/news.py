import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from newsbrief_core import NewsClient, ProviderError, fallback_news, get_news
from newsbrief_api.deps import get_news_client, read_json_body
from newsbrief_api.schemas import ErrorResponse, ProviderFailureResponse, TopicRequest

logger = logging.getLogger(__name__)

INVALID_TOPIC = 'Missing or invalid "topic" in request body.'

router = APIRouter(prefix="/api", tags=["news"])


@router.post(
    "/news",
    responses={400: {"model": ErrorResponse}, 500: {"model": ProviderFailureResponse}},
)
async def news(request: Request, client: NewsClient = Depends(get_news_client)):
    try:
        req = TopicRequest.model_validate(await read_json_body(request))
    except (ValueError, ValidationError):
        return JSONResponse({"error": INVALID_TOPIC}, status_code=400)

    logger.info("news topic=%r page=%d mode=%s", req.topic, req.page, client.mode)
    try:
        items, used_fallback = await run_in_threadpool(get_news, client, req.topic, req.page)
    except ProviderError as e:
        logger.exception("Provider call failed for topic=%r", req.topic)
        return JSONResponse({"error": str(e), "fallback": fallback_news()}, status_code=500)

    if used_fallback:
        logger.info("Served fallback for topic=%r", req.topic)
    return JSONResponse(items, status_code=200)
