"""
Composer Module - Post editor form state

The composer lives in the visitor's session between requests. It has two
modes: creating a new post and editing an existing one.
"""

from models import PostDraft

MODE_CREATE = 'create'
MODE_EDIT = 'edit'

SESSION_KEY = 'composer'

# Values of PostComposer.panel_state
PANEL_HIDDEN = None
PANEL_SIGN_IN = 'sign_in'
PANEL_FORM = 'form'


class PostComposer:

    def __init__(self, state=None, default_tags='React,TypeScript'):
        state = state or {}
        self.default_tags = default_tags
        self.mode = state.get('mode', MODE_CREATE)
        self.post_id = state.get('post_id')
        self.title = state.get('title', '')
        self.tags = state.get('tags', default_tags)
        self.content = state.get('content', '')
        self.is_open = state.get('is_open', False)

    @classmethod
    def load(cls, session, default_tags='React,TypeScript'):
        return cls(session.get(SESSION_KEY), default_tags=default_tags)

    def save(self, session):
        session[SESSION_KEY] = self.to_dict()

    def to_dict(self):
        return {
            'mode': self.mode,
            'post_id': self.post_id,
            'title': self.title,
            'tags': self.tags,
            'content': self.content,
            'is_open': self.is_open,
        }

    @property
    def editing(self):
        return self.mode == MODE_EDIT

    def set_fields(self, title=None, tags=None, content=None):
        if title is not None:
            self.title = title
        if tags is not None:
            self.tags = tags
        if content is not None:
            self.content = content

    def clear(self):
        self.title = ''
        self.tags = self.default_tags
        self.content = ''

    def _exit_edit(self):
        self.mode = MODE_CREATE
        self.post_id = None

    def begin_edit(self, post):
        """Pre-fill from `post` and force the panel open"""
        self.mode = MODE_EDIT
        self.post_id = post.id
        self.title = post.title
        self.tags = ','.join(post.tags)
        self.content = post.content
        self.is_open = True

    def toggle(self):
        """New-post button: leave edit mode and show or hide the panel"""
        if self.editing:
            self._exit_edit()
            self.clear()
        self.is_open = not self.is_open

    def cancel(self):
        self._exit_edit()
        self.clear()
        self.is_open = False

    def draft(self):
        return PostDraft(title=self.title, tags=self.tags, content=self.content)

    def submit(self, client, identity):
        """
        Create or update depending on the mode, then reset the form.

        The form is cleared and closed once the write call returns,
        whatever its outcome.
        """
        if self.editing and self.post_id:
            result = client.update(identity, self.post_id, self.draft())
        else:
            result = client.create(identity, self.draft())
        self._exit_edit()
        self.clear()
        self.is_open = False
        return result

    @staticmethod
    def panel_state(can_write):
        """What to render: nothing while pending, a sign-in box, or the form"""
        if can_write is None:
            return PANEL_HIDDEN
        return PANEL_FORM if can_write else PANEL_SIGN_IN
