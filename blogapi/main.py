import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogapi.exceptions import StoreError
from blogapi.routers import admin, posts, tags, token
from blogapi.security import require_bearer_token
from blogapi.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog API", description="Posts, tags and token-gated publishing")


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    logger.info(f"Invalid request for {request.method} {request.url.path}")
    return JSONResponse(status_code=400, content={"detail": "invalid request"})


# Raised by dependencies, before any route's own error handling runs
@app.exception_handler(StoreError)
async def store_unavailable(request: Request, exc: StoreError):
    logger.error(f"Store failure for {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500, content={"detail": "Failed to reach the posts store"}
    )


app.include_router(posts.router)
app.include_router(tags.router)
app.include_router(token.router)
app.include_router(admin.router, dependencies=[Depends(require_bearer_token)])


@app.get("/")
async def root():
    return {"message": "Blog API is running"}
