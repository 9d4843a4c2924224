import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsbrief_core import NewsClient
from newsbrief_core.config import CORS_ORIGINS, LOG_LEVEL
from newsbrief_api.routers import news, search

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method Not Allowed. Use POST."


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing OPENAI_API_KEY / bad NEWS_MODE fails here, before serving anything.
    app.state.news_client = NewsClient.from_env()
    logger.info("Provider client ready (mode=%s, model=%s)", app.state.news_client.mode,
                app.state.news_client.settings.model)
    yield


app = FastAPI(title="NewsBrief API", version="0.1.0", lifespan=lifespan)

# CORS for the browser UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 and request.url.path.startswith("/api/"):
        detail = METHOD_NOT_ALLOWED
    else:
        detail = exc.detail
    return JSONResponse({"error": detail}, status_code=exc.status_code, headers=exc.headers)


@app.get("/healthz")
def healthz():
    return {"ok": True}

app.include_router(news.router)
app.include_router(search.router)
