"""
Post Store Module - Blog post reads and admin-gated writes

Reads degrade silently to the seed posts. Writes are refused unless the
identity holds an admin grant, report failures verbatim to the user and
are always followed by a fresh listing; the local list is never patched
in place.
"""

import logging
from datetime import datetime, timezone
from pydantic import ValidationError
from models import Post, PostDraft
from . import notifications
from .documents import SERVER_TIMESTAMP, DESCENDING


class PostStoreClient:

    def __init__(self, store, authorization, seed_factory, notifier,
                 collection='posts', limit=50, excerpt_length=140,
                 logger=None, today=None):
        self.store = store
        self.authorization = authorization
        self.seed_factory = seed_factory
        self.notifier = notifier
        self.collection = collection
        self.limit = limit
        self.excerpt_length = excerpt_length
        self.logger = logger or logging.getLogger(__name__)
        self._today = today or (lambda: datetime.now(timezone.utc).date())

    # ------------------------------------------------------------------ reads

    def list_posts(self):
        """Load the newest posts, falling back to the seed list. The client holds no copy"""
        try:
            documents = self.store.query(self.collection, 'createdAt', DESCENDING, self.limit)
        except Exception as e:
            self.logger.error(f"Could not load blog posts: {str(e)}")
            documents = []

        posts = []
        for doc_id, data in documents[:self.limit]:
            try:
                posts.append(Post.from_document(doc_id, data))
            except ValidationError as e:
                self.logger.warning(f"Skipping malformed post {doc_id}: {e.error_count()} invalid field(s)")

        return posts if posts else self.seed_factory()

    # ----------------------------------------------------------------- writes

    def create(self, identity, draft):
        """Publish a new post; returns True when the write succeeded"""
        if not self.authorization.check(identity):
            self.notifier(notifications.DENIED_CREATE, 'error')
            return False

        draft = PostDraft.model_validate(draft)
        document = draft.to_fields(self.excerpt_length)
        document['createdAt'] = SERVER_TIMESTAMP
        document['date'] = self._today().isoformat()
        try:
            post_id = self.store.add(self.collection, document)
        except Exception as e:
            self.logger.error(f"Error creating post: {str(e)}")
            self.notifier(notifications.publish_error(e), 'error')
            return False

        self.logger.info(f"Post {post_id} created by {identity.id}")
        self.notifier(notifications.POST_PUBLISHED, 'success')
        self.list_posts()
        return True

    def update(self, identity, post_id, draft):
        """Overwrite title, tags and content of an existing post"""
        if not self.authorization.check(identity):
            self.notifier(notifications.DENIED_UPDATE, 'error')
            return False

        draft = PostDraft.model_validate(draft)
        fields = draft.to_fields(self.excerpt_length)
        fields['updatedAt'] = SERVER_TIMESTAMP
        try:
            self.store.update(self.collection, post_id, fields)
        except Exception as e:
            self.logger.error(f"Error updating post {post_id}: {str(e)}")
            self.notifier(notifications.update_error(e), 'error')
            return False

        self.logger.info(f"Post {post_id} updated by {identity.id}")
        self.notifier(notifications.POST_UPDATED, 'success')
        self.list_posts()
        return True

    def delete(self, identity, post_id, confirm):
        """
        Remove a post after the user confirms.

        Args:
            identity: Signed-in identity (or None)
            post_id (str): Document id
            confirm (callable): Asked with the prompt text, must return True to proceed

        Returns:
            bool: True when the post was deleted
        """
        if not self.authorization.check(identity):
            self.notifier(notifications.DENIED_DELETE, 'error')
            return False
        if not confirm(notifications.CONFIRM_DELETE):
            return False

        try:
            self.store.delete(self.collection, post_id)
        except Exception as e:
            self.logger.error(f"Error deleting post {post_id}: {str(e)}")
            self.notifier(notifications.delete_error(e), 'error')
            return False

        self.logger.info(f"Post {post_id} deleted by {identity.id}")
        self.notifier(notifications.POST_DELETED, 'success')
        self.list_posts()
        return True
