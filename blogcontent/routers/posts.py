import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogcontent import dependencies as deps
from blogcontent.errors import NotFoundError
from blogcontent.schemas.blog import PostMeta, RenderedPost, TagSummary
from blogcontent.services.content_renderer import render_content
from blogcontent.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostMeta])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.get_all_meta_sorted()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=RenderedPost)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its body rendered to HTML."""
    try:
        post = service.get_by_slug(slug)
        return RenderedPost(
            slug=post.slug,
            meta=post.meta,
            content=post.content,
            html=render_content(post.content),
        )
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/tags", response_model=List[TagSummary])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.get_all_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=List[PostMeta])
def list_posts_by_tag(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return service.get_by_tag(tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts for tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
