import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from quoteapi.endpoints import quotes
from quoteapi.utils.constants import Server
from quoteapi.utils.dataset import read_dataset
from quoteapi.utils.errors import DatasetError

description = """Random quotes from a small packaged dataset."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    # the dataset must be valid before any request is served
    try:
        app.state.dataset = read_dataset(Server.DATASET_PATH)
    except DatasetError as e:
        logger.error(f"Refusing to start, quote dataset is unusable: {e}")
        raise

    logger.info(f"Server started at: {datetime.datetime.now(datetime.timezone.utc)}")

    yield
    # closing down, anything after yield will be ran as shutdown event.
    logger.info(
        f"Server shutting down at: {datetime.datetime.now(datetime.timezone.utc)}"
    )


app = FastAPI(
    title="Quote API",
    description=description,
    version="0.1",
    debug=Server.DEBUG,
    lifespan=lifespan,
)

app.include_router(quotes.router, tags=["quotes"])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exception: StarletteHTTPException):
    """Render HTTP errors as JSON, keeping the headers they carry."""
    return JSONResponse(
        content={"error": str(exception.detail)},
        status_code=exception.status_code,
        headers=exception.headers,
    )


@app.get("/status/")
async def server_status(request: Request) -> Response:
    return Response(content="Server is running.", status_code=200)
