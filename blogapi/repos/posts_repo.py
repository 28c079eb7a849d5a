import logging
from typing import List

from pydantic import ValidationError as PydanticValidationError

from blogapi.exceptions import NotFound, StoreError
from blogapi.repos.post_store import Contains, Equals, HasId, Record, record_id
from blogapi.schemas.blog import Card, Info, Post, to_card
from blogapi.settings import Settings

logger = logging.getLogger(__name__)

PUBLISHED = Equals("isDraft", False)
DRAFTS = Equals("isDraft", True)


class PostsRepo:
    def __init__(self, store, settings: Settings):
        self.store = store
        self.neighbor_order = settings.NEIGHBOR_ORDER

    def list_published(self) -> List[Card]:
        return [to_card(post) for post in self._published()]

    def list_by_tag(self, tag: str) -> List[Card]:
        records = self.store.scan(PUBLISHED & Contains("tags", tag))
        return [to_card(record_to_post(record)) for record in records]

    def list_drafts(self) -> List[Card]:
        return [to_card(record_to_post(record)) for record in self.store.scan(DRAFTS)]

    def get_by_id(self, post_id: str) -> Post:
        """
        Return a published post with its previous/next neighbors filled in.

        Neighbors are the adjacent entries of the published set, in the
        store's scan order unless chronological ordering is configured.
        """
        posts = self._published()
        if self.neighbor_order == "chronological":
            posts.sort(key=lambda p: p.createDate)

        index = next((i for i, post in enumerate(posts) if post.id == post_id), -1)
        if index == -1:
            raise NotFound(f"Post with ID {post_id} not found")

        current = posts[index]
        if index > 0:
            current.previous = posts[index - 1].info()
        if index < len(posts) - 1:
            current.next = posts[index + 1].info()
        return current

    def find_record(self, post_id: str) -> Record | None:
        """Look up a stored record by id, drafts included."""
        records = self.store.scan(HasId(post_id))
        return records[0] if records else None

    def _published(self) -> List[Post]:
        return [record_to_post(record) for record in self.store.scan(PUBLISHED)]


def record_to_post(record: Record) -> Post:
    # null attributes fall back to the field defaults
    data = {
        key: value
        for key, value in record.items()
        if not key.startswith("_") and value is not None
    }
    data["id"] = record_id(record)
    # neighbors are derived, never read back from storage
    data.pop("previous", None)
    data.pop("next", None)
    try:
        return Post.model_validate(data)
    except PydanticValidationError as e:
        raise StoreError(f"Error unmarshaling post {data.get('id')}: {e}") from e


def post_to_record(post: Post) -> Record:
    record = post.model_dump(exclude={"previous", "next"})
    if not record.get("modifiedDate"):
        record.pop("modifiedDate", None)
    return record
