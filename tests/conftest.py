import pycouchdb

from blogapi.settings import Settings

SECRET = "a-test-signing-secret-that-is-long-enough"


def make_settings(**overrides) -> Settings:
    values = {
        "USER_SECRET_KEY": SECRET,
        "TOKEN_AUDIENCE": "blog-readers",
        "TOKEN_ISSUER": "blog-api",
    }
    values.update(overrides)
    return Settings(**values)


def make_record(post_id: str, **fields) -> dict:
    record = {
        "_id": post_id,
        "_rev": "1-abc",
        "id": post_id,
        "title": f"Title {post_id}",
        "summary": f"Summary {post_id}",
        "content": f"Content of {post_id}",
        "author": "someone",
        "tags": [],
        "createDate": "",
        "isDraft": False,
        "layout": "post",
    }
    record.update(fields)
    return record


class FakeCouchDB:
    """
    Minimal in-memory CouchDB stand-in.
    Documents are returned by all() in insertion order.
    Set track_calls=True to record the order of calls.
    """

    def __init__(self, docs=None, track_calls: bool = False):
        self.docs = {doc["_id"]: doc for doc in (docs or [])}
        self.track_calls = track_calls
        self.calls = []
        self.saved = []

    def get(self, doc_id: str) -> dict:
        if self.track_calls:
            self.calls.append(f"get({doc_id})")
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        return self.docs[doc_id]

    def all(self, include_docs: bool = True):
        if self.track_calls:
            self.calls.append(f"all(include_docs={include_docs})")
        if include_docs:
            return [{"id": key, "doc": doc} for key, doc in self.docs.items()]
        return [{"id": key} for key in self.docs]

    def save(self, doc: dict) -> dict:
        if self.track_calls:
            self.calls.append(f"save({doc['_id']})")
        existing = self.docs.get(doc["_id"])
        if existing is not None and existing.get("_rev") != doc.get("_rev"):
            raise pycouchdb.exceptions.Conflict(doc["_id"])
        generation = int(doc.get("_rev", "0-x").split("-")[0]) + 1
        stored = {**doc, "_rev": f"{generation}-fake"}
        self.docs[doc["_id"]] = stored
        self.saved.append(stored)
        return stored


class FakeStore:
    """
    Store adapter stand-in that applies predicates to a fixed record list.
    """

    def __init__(self, records=None, error: Exception | None = None):
        self.records = list(records or [])
        self.error = error
        self.put_records = []
        self.predicates = []

    def scan(self, predicate):
        self.predicates.append(predicate)
        if self.error:
            raise self.error
        return [record for record in self.records if predicate(record)]

    def put(self, record):
        if self.error:
            raise self.error
        self.put_records.append(record)
        return record


class FakeRepo:
    """
    Minimal repo stand-in used in service and router tests.
    """

    def __init__(self, cards=None, post=None, drafts=None, error=None):
        self.cards = cards or []
        self.post = post
        self.drafts = drafts or []
        self.error = error
        self.tag_calls = []

    def list_published(self):
        if self.error:
            raise self.error
        return self.cards

    def list_by_tag(self, tag):
        self.tag_calls.append(tag)
        if self.error:
            raise self.error
        return [card for card in self.cards if tag in card.tags]

    def list_drafts(self):
        if self.error:
            raise self.error
        return self.drafts

    def get_by_id(self, post_id):
        if self.error:
            raise self.error
        return self.post


class FakeWriter:
    """
    Post writer stand-in recording what it was asked to save.
    """

    def __init__(self, error=None, new_id="f" * 24):
        self.error = error
        self.new_id = new_id
        self.calls = []

    def save(self, post, is_new):
        self.calls.append((post, is_new))
        if self.error:
            raise self.error
        if is_new:
            post.id = self.new_id
        return True
