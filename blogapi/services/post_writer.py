import datetime
import logging
import uuid

from blogapi.exceptions import NotFound, StoreError, WriteError
from blogapi.repos.posts_repo import post_to_record
from blogapi.schemas.blog import Post
from blogapi.settings import Settings

logger = logging.getLogger(__name__)

POST_ID_LENGTH = 24


def generate_post_id() -> str:
    return uuid.uuid4().hex[:POST_ID_LENGTH]


def now_rfc3339() -> str:
    return (
        datetime.datetime.now(datetime.timezone.utc)
        .replace(microsecond=0)
        .isoformat()
        .replace("+00:00", "Z")
    )


class PostWriter:
    def __init__(self, store, repo, settings: Settings, clock=now_rfc3339):
        self.store = store
        self.repo = repo
        self.require_existing = settings.UPDATE_REQUIRES_EXISTING
        self.clock = clock

    def save(self, post: Post, is_new: bool) -> bool:
        """
        Create or update a post.

        A new post gets a fresh id and createDate. An update refreshes
        modifiedDate and keeps the caller's id and createDate; when the id
        has to exist already, the stored createDate fills in a missing one.
        """
        current = self.clock()

        if is_new:
            post.id = generate_post_id()
            post.createDate = current
            post.modifiedDate = ""
        else:
            if self.require_existing:
                self._carry_stored_fields(post)
            post.modifiedDate = current

        post.tags_to_lower()
        logger.debug(f"Saving post {post.id!r} ({post.title!r}), new={is_new}")

        record = post_to_record(post)
        if not record.get("id"):
            raise WriteError(
                f"Post record is missing the 'id' key. Available keys: {sorted(record)}"
            )

        try:
            self.store.put(record)
        except StoreError as e:
            raise WriteError(f"Error saving post {post.id}: {e}") from e

        logger.info(f"{'Created' if is_new else 'Updated'} post {post.id}")
        return True

    def _carry_stored_fields(self, post: Post) -> None:
        try:
            stored = self.repo.find_record(post.id)
        except StoreError as e:
            raise WriteError(f"Error looking up post {post.id}: {e}") from e
        if stored is None:
            raise NotFound(f"Post with ID {post.id} not found")
        if not post.createDate:
            post.createDate = stored.get("createDate", "")
