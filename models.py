from extensions import db
from datetime import date, datetime, timezone
from typing import List, Optional
from flask_login import UserMixin
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from sqlalchemy import JSON
import uuid

EXCERPT_SUFFIX = '…'


def utc_now():
    return datetime.now(timezone.utc)


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class Document(db.Model):
    """A schemaless document in a named collection (local document backend)"""
    __tablename__ = 'documents'
    id = db.Column(db.String(128), primary_key=True, default=lambda: uuid.uuid4().hex)
    collection = db.Column(db.String(100), primary_key=True)
    data = db.Column(SafeJSON, default={})
    created_at = db.Column(db.DateTime(timezone=True))
    updated_at = db.Column(db.DateTime(timezone=True))

    __table_args__ = (
        db.Index('idx_document_collection_created', 'collection', 'created_at'),
    )


class Identity(UserMixin):
    """Signed-in user as reported by the auth provider"""

    def __init__(self, id, email=None):
        self.id = id
        self.email = email

    def to_dict(self):
        return {'id': self.id, 'email': self.email}

    @classmethod
    def from_dict(cls, data):
        if not data or not data.get('id'):
            return None
        return cls(data['id'], data.get('email'))

    def __eq__(self, other):
        if not isinstance(other, Identity):
            return NotImplemented
        return self.id == other.id and self.email == other.email

    def __hash__(self):
        return hash((self.id, self.email))

    def __repr__(self):
        return f'Identity(id={self.id!r}, email={self.email!r})'


def make_excerpt(content: str, length: int = 140) -> str:
    """First `length` characters of the body followed by an ellipsis"""
    return content[:length] + EXCERPT_SUFFIX


def parse_tags(raw) -> List[str]:
    """Split a comma separated tag string, dropping blanks"""
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(',')
    return [str(tag).strip() for tag in raw if str(tag).strip()]


class PostDraft(BaseModel):
    """Fields an admin submits when creating or editing a post"""

    title: str
    tags: List[str] = Field(default_factory=list)
    content: str

    @field_validator('tags', mode='before')
    @classmethod
    def _split_tags(cls, value):
        return parse_tags(value)

    def to_fields(self, excerpt_length: int = 140) -> dict:
        return {
            'title': self.title,
            'tags': list(self.tags),
            'excerpt': make_excerpt(self.content, excerpt_length),
            'content': self.content,
        }


class Post(BaseModel):
    """
    A blog post as read from the document store.

    Fetched documents are loosely typed; `from_document` coerces what it
    can (comma separated tags, timestamp dates) and rejects the rest.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    tags: List[str] = Field(default_factory=list)
    excerpt: str = ''
    content: str
    date: str = ''
    created_at: Optional[datetime] = Field(default=None, alias='createdAt')
    updated_at: Optional[datetime] = Field(default=None, alias='updatedAt')

    @field_validator('tags', mode='before')
    @classmethod
    def _coerce_tags(cls, value):
        if value is not None and not isinstance(value, (str, list, tuple)):
            raise ValueError('tags must be a list or a comma separated string')
        return parse_tags(value)

    @field_validator('date', mode='before')
    @classmethod
    def _coerce_date(cls, value):
        if value is None:
            return ''
        if isinstance(value, (datetime, date)):
            return value.isoformat()[:10]
        return value

    @model_validator(mode='after')
    def _derive_missing(self):
        # frozen model: fill derived fields through object.__setattr__
        if not self.excerpt:
            object.__setattr__(self, 'excerpt', make_excerpt(self.content))
        if not self.date and self.created_at is not None:
            object.__setattr__(self, 'date', self.created_at.date().isoformat())
        return self

    @classmethod
    def from_document(cls, doc_id, data):
        return cls.model_validate({**(data or {}), 'id': doc_id})

    def to_dict(self):
        return self.model_dump(by_alias=True)
