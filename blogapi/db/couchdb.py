import logging
from functools import lru_cache

import pycouchdb

from blogapi.exceptions import StoreError
from blogapi.settings import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_couch():
    """
    Create the CouchDB database handle holding the posts.
    Called at runtime to avoid import-time connections; the handle is
    shared by every request for the life of the process.
    """
    try:
        couch = pycouchdb.Server(settings.couchdb_url)
        return couch.database(settings.COUCHDB_DATABASE)
    except Exception as e:
        logger.error(
            f"Cannot open CouchDB database {settings.COUCHDB_DATABASE} "
            f"at {settings.COUCHDB_HOST}:{settings.COUCHDB_PORT}: {e}"
        )
        raise StoreError(
            f"Error opening database {settings.COUCHDB_DATABASE}: {e}"
        ) from e
