import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogapi import dependencies as deps
from blogapi.exceptions import NotFound, ValidationError, WriteError
from blogapi.repos.posts_repo import PostsRepo
from blogapi.schemas.blog import Card, Post, PostInput, SaveResult
from blogapi.services.post_writer import PostWriter

logger = logging.getLogger(__name__)

# Mounted behind the bearer-token gate in main.py
router = APIRouter()


@router.get("/drafts", response_model=List[Card])
def list_drafts(repo: PostsRepo = Depends(deps.get_posts_repo)):
    try:
        return repo.list_drafts()
    except Exception as e:
        logger.error(f"Unexpected error listing drafts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve drafts")


@router.post("/posts", response_model=SaveResult)
def create_post(body: PostInput, writer: PostWriter = Depends(deps.get_post_writer)):
    post = Post(**body.model_dump())
    try:
        ok = writer.save(post, is_new=True)
    except WriteError as e:
        logger.error(f"Error creating post: {e}")
        raise HTTPException(status_code=500, detail="Failed to create post")
    except Exception as e:
        logger.error(f"Unexpected error creating post: {e}")
        raise HTTPException(status_code=500, detail="Failed to create post")
    return SaveResult(id=post.id, ok=ok)


@router.put("/posts/{post_id}", response_model=SaveResult)
def update_post(
    post_id: str,
    body: PostInput,
    writer: PostWriter = Depends(deps.get_post_writer),
):
    try:
        if not post_id.strip():
            raise ValidationError("post ID is required in URL")
        post = Post(**body.model_dump(), id=post_id)
        ok = writer.save(post, is_new=False)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except WriteError as e:
        logger.error(f"Error updating post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update post")
    except Exception as e:
        logger.error(f"Unexpected error updating post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update post")
    return SaveResult(id=post_id, ok=ok)
