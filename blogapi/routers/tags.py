import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from blogapi import dependencies as deps
from blogapi.schemas.blog import Card
from blogapi.services.tags_service import TagsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags", response_model=Dict[str, int])
def get_tags(service: TagsService = Depends(deps.get_tags_service)):
    """Get how many published posts carry each tag."""
    try:
        return service.aggregate_tags()
    except Exception as e:
        logger.error(f"Unexpected error aggregating tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=List[Card])
def get_posts_by_tag(tag: str, service: TagsService = Depends(deps.get_tags_service)):
    try:
        return service.posts_by_tag(tag)
    except Exception as e:
        logger.error(f"Unexpected error listing posts tagged {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
