"""
Authorization Module - Admin allow-list check
"""

import logging


class AdminAuthorization:
    """
    Grants write access to identities listed in the admins collection.

    A grant is any document whose id is the user's id; its fields are
    never read. Any failure to read the grant counts as "not authorized".
    """

    def __init__(self, store, collection='admins', logger=None):
        self.store = store
        self.collection = collection
        self.logger = logger or logging.getLogger(__name__)

    def check(self, identity):
        if identity is None or not getattr(identity, 'id', None):
            return False
        try:
            self.logger.debug(f"Checking admin grant for {identity.id}")
            granted = self.store.get(self.collection, identity.id) is not None
        except Exception as e:
            self.logger.error(f"Admin check failed for {identity.id}: {str(e)}")
            return False
        self.logger.debug(f"Admin grant for {identity.id}: {granted}")
        return granted

    __call__ = check
