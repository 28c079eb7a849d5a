import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogapi import dependencies as deps
from blogapi.exceptions import NotFound
from blogapi.repos.posts_repo import PostsRepo
from blogapi.schemas.blog import Card, Post

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[Card])
def list_posts(repo: PostsRepo = Depends(deps.get_posts_repo)):
    """Get the cards of all published posts."""
    try:
        return repo.list_published()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{post_id}", response_model=Post)
def get_post(post_id: str, repo: PostsRepo = Depends(deps.get_posts_repo)):
    """Get a single published post with its previous/next links."""
    try:
        return repo.get_by_id(post_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
