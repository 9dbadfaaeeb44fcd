"""
Firebase Module - Firebase Authentication and Cloud Firestore backends
"""

from typing import Optional
import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials, firestore
from models import Identity
from .auth_provider import AuthProvider, InvalidTokenError
from .documents import DocumentStore, DocumentStoreError, SERVER_TIMESTAMP, DESCENDING

# Module-level app cache
_firebase_app: Optional[firebase_admin.App] = None


def get_firebase_app(credentials_path=None, project_id=None):
    """
    Initialize (once) and return the Firebase Admin app.

    Uses the service account file when given, Application Default
    Credentials otherwise.
    """
    global _firebase_app

    if _firebase_app is None:
        if credentials_path:
            cred = credentials.Certificate(credentials_path)
        else:
            cred = credentials.ApplicationDefault()
        options = {'projectId': project_id} if project_id else None
        _firebase_app = firebase_admin.initialize_app(cred, options)

    return _firebase_app


def reset_firebase_app() -> None:
    """Drop the cached Firebase app (used by tests)"""
    global _firebase_app
    if _firebase_app is not None:
        firebase_admin.delete_app(_firebase_app)
    _firebase_app = None


class FirebaseAuthProvider(AuthProvider):
    """Verifies Firebase Authentication ID tokens"""

    def __init__(self, app=None, redirect_url=None):
        super().__init__(redirect_url=redirect_url)
        self._app = app

    def verify_token(self, id_token):
        if not id_token:
            raise InvalidTokenError('Missing sign-in token')
        try:
            claims = firebase_auth.verify_id_token(id_token, app=self._app)
        except (ValueError, firebase_auth.InvalidIdTokenError,
                firebase_auth.ExpiredIdTokenError, firebase_auth.RevokedIdTokenError) as e:
            raise InvalidTokenError(str(e)) from e
        return Identity(claims['uid'], claims.get('email'))


class FirestoreDocumentStore(DocumentStore):
    """Document store on Cloud Firestore"""

    def __init__(self, client=None, app=None):
        self._client = client
        self._app = app

    @property
    def client(self):
        if self._client is None:
            self._client = firestore.client(app=self._app)
        return self._client

    @staticmethod
    def _prepare(fields):
        return {
            key: firestore.SERVER_TIMESTAMP if value is SERVER_TIMESTAMP else value
            for key, value in fields.items()
        }

    def get(self, collection, doc_id):
        try:
            snapshot = self.client.collection(collection).document(doc_id).get()
        except Exception as e:
            raise DocumentStoreError('get', collection, e) from e
        return snapshot.to_dict() if snapshot.exists else None

    def query(self, collection, order_by, direction=DESCENDING, limit=None):
        fs_direction = (firestore.Query.DESCENDING if direction == DESCENDING
                        else firestore.Query.ASCENDING)
        query = self.client.collection(collection).order_by(order_by, direction=fs_direction)
        if limit is not None:
            query = query.limit(limit)
        try:
            return [(snap.id, snap.to_dict() or {}) for snap in query.stream()]
        except Exception as e:
            raise DocumentStoreError('query', collection, e) from e

    def add(self, collection, data):
        try:
            _, ref = self.client.collection(collection).add(self._prepare(data))
        except Exception as e:
            raise DocumentStoreError('add', collection, e) from e
        return ref.id

    def set(self, collection, doc_id, data):
        try:
            self.client.collection(collection).document(doc_id).set(self._prepare(data))
        except Exception as e:
            raise DocumentStoreError('set', collection, e) from e

    def update(self, collection, doc_id, fields):
        try:
            self.client.collection(collection).document(doc_id).update(self._prepare(fields))
        except Exception as e:
            raise DocumentStoreError('update', collection, e) from e

    def delete(self, collection, doc_id):
        try:
            self.client.collection(collection).document(doc_id).delete()
        except Exception as e:
            raise DocumentStoreError('delete', collection, e) from e
