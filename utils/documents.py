"""
Documents Module - Document store boundary
Point reads, ordered/limited collection queries, create, field update and delete.

Two backends share this interface:
- SQLDocumentStore keeps documents in the local database (Flask-SQLAlchemy)
- FirestoreDocumentStore (utils/firebase.py) talks to Cloud Firestore
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Document, utc_now


class _ServerTimestamp:
    """Sentinel replaced by the backend with its own write time"""

    def __repr__(self):
        return 'SERVER_TIMESTAMP'


SERVER_TIMESTAMP = _ServerTimestamp()

ASCENDING = 'asc'
DESCENDING = 'desc'


class DocumentStoreError(Exception):
    """Raised when the backing store rejects or fails an operation"""

    def __init__(self, operation, collection, cause=None):
        self.operation = operation
        self.collection = collection
        self.cause = cause
        message = f'{operation} on {collection!r} failed'
        if cause is not None:
            message = f'{message}: {cause}'
        super().__init__(message)


class DocumentStore:
    """Interface every document backend implements"""

    def get(self, collection: str, doc_id: str) -> Optional[Dict]:
        """Return the document's fields, or None if it does not exist"""
        raise NotImplementedError

    def query(self, collection: str, order_by: str, direction: str = DESCENDING,
              limit: Optional[int] = None) -> List[Tuple[str, Dict]]:
        """Return (id, fields) pairs ordered by a field"""
        raise NotImplementedError

    def add(self, collection: str, data: Dict) -> str:
        """Create a document with a store-assigned id and return the id"""
        raise NotImplementedError

    def update(self, collection: str, doc_id: str, fields: Dict) -> None:
        """Overwrite the given fields of an existing document"""
        raise NotImplementedError

    def delete(self, collection: str, doc_id: str) -> None:
        raise NotImplementedError

    def set(self, collection: str, doc_id: str, data: Dict) -> None:
        """Create or replace a document under a caller-chosen id"""
        raise NotImplementedError


class SQLDocumentStore(DocumentStore):
    """
    Document store on top of the application database.

    Fields holding SERVER_TIMESTAMP are stamped with the current time.
    `createdAt` and `updatedAt` are additionally mirrored into indexed
    columns so collection queries can order on them.
    """

    TIMESTAMP_COLUMNS = {
        'createdAt': 'created_at',
        'updatedAt': 'updated_at',
    }

    def __init__(self, session=None, clock=utc_now):
        self._session = session
        self._clock = clock

    @property
    def session(self):
        return self._session or db.session

    def _stamp(self, fields):
        now = self._clock()
        stamped = {}
        columns = {}
        for key, value in fields.items():
            if value is SERVER_TIMESTAMP:
                value = now
            if key in self.TIMESTAMP_COLUMNS:
                columns[self.TIMESTAMP_COLUMNS[key]] = value
            stamped[key] = value.isoformat() if hasattr(value, 'isoformat') else value
        return stamped, columns

    def _load(self, document):
        data = dict(document.data or {})
        # timestamps come back from the columns as datetimes
        for key, column in self.TIMESTAMP_COLUMNS.items():
            value = getattr(document, column)
            if value is not None:
                data[key] = value
        return data

    def _find(self, collection, doc_id):
        return self.session.get(Document, {'id': doc_id, 'collection': collection})

    def get(self, collection, doc_id):
        try:
            document = self._find(collection, doc_id)
        except SQLAlchemyError as e:
            raise DocumentStoreError('get', collection, e) from e
        return self._load(document) if document is not None else None

    def query(self, collection, order_by, direction=DESCENDING, limit=None):
        column_name = self.TIMESTAMP_COLUMNS.get(order_by)
        if column_name is None:
            raise ValueError(f'Cannot order by {order_by!r}; supported: {sorted(self.TIMESTAMP_COLUMNS)}')
        column = getattr(Document, column_name)
        stmt = (
            db.select(Document)
            .filter(Document.collection == collection, column.is_not(None))
            .order_by(column.desc() if direction == DESCENDING else column.asc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            documents = self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise DocumentStoreError('query', collection, e) from e
        return [(d.id, self._load(d)) for d in documents]

    def add(self, collection, data):
        stamped, columns = self._stamp(data)
        document = Document(collection=collection, data=stamped, **columns)
        try:
            self.session.add(document)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DocumentStoreError('add', collection, e) from e
        return document.id

    def set(self, collection, doc_id, data):
        stamped, columns = self._stamp(data)
        try:
            document = self._find(collection, doc_id)
            if document is None:
                document = Document(id=doc_id, collection=collection)
                self.session.add(document)
            document.data = stamped
            document.created_at = columns.get('created_at')
            document.updated_at = columns.get('updated_at')
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DocumentStoreError('set', collection, e) from e

    def update(self, collection, doc_id, fields):
        stamped, columns = self._stamp(fields)
        try:
            document = self._find(collection, doc_id)
            if document is None:
                raise DocumentStoreError('update', collection, f'no document {doc_id!r}')
            # reassign so the JSON column is flagged dirty
            document.data = {**(document.data or {}), **stamped}
            for column, value in columns.items():
                setattr(document, column, value)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DocumentStoreError('update', collection, e) from e

    def delete(self, collection, doc_id):
        try:
            document = self._find(collection, doc_id)
            if document is not None:
                self.session.delete(document)
                self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DocumentStoreError('delete', collection, e) from e


__all__ = [
    'DocumentStore',
    'SQLDocumentStore',
    'DocumentStoreError',
    'SERVER_TIMESTAMP',
    'ASCENDING',
    'DESCENDING',
]
