from fastapi import Depends

from blogapi.db.couchdb import get_couch
from blogapi.repos.post_store import CouchPostStore
from blogapi.repos.posts_repo import PostsRepo
from blogapi.security import get_settings
from blogapi.services.post_writer import PostWriter
from blogapi.services.tags_service import TagsService


def get_post_store(couch=Depends(get_couch)):
    return CouchPostStore(couch)


def get_posts_repo(store=Depends(get_post_store), current_settings=Depends(get_settings)):
    return PostsRepo(store, current_settings)


def get_tags_service(repo=Depends(get_posts_repo)):
    return TagsService(repo)


def get_post_writer(
    store=Depends(get_post_store),
    repo=Depends(get_posts_repo),
    current_settings=Depends(get_settings),
):
    return PostWriter(store, repo, current_settings)
