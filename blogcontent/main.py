import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blogcontent.dependencies import get_posts_service
from blogcontent.routers import posts
from blogcontent.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog Content API", description="Posts, tags and rendered bodies")


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = app.dependency_overrides.get(get_posts_service, get_posts_service)()
    posts_loaded = service.load_all()
    logger.info(f"Post cache warmed with {len(posts_loaded)} posts")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Blog Content API is running"}
