import logging
from collections import Counter

from blogapi.schemas.blog import Tags

logger = logging.getLogger(__name__)


class TagsService:
    def __init__(self, repo):
        self.repo = repo

    def aggregate_tags(self) -> Tags:
        """Count tags across all published posts, case-insensitively."""
        counter = Counter(
            tag.lower()
            for card in self.repo.list_published()
            for tag in card.tags
            if tag
        )
        logger.debug(f"Aggregated {len(counter)} distinct tags")
        return dict(counter)

    def posts_by_tag(self, tag: str):
        return self.repo.list_by_tag(tag.lower())
