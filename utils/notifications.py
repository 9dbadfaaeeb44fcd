"""
Notifications Module - User-facing notices
Writes report their outcome through a notifier; in the web app that is
Flask's flash queue, shown on the next rendered page.
"""

from flask import flash


# Notice texts
DENIED_CREATE = 'Only the admin can create posts.'
DENIED_UPDATE = 'Only the admin can update posts.'
DENIED_DELETE = 'Only the admin can delete posts.'
POST_PUBLISHED = 'Post published.'
POST_UPDATED = 'Post updated.'
POST_DELETED = 'Post deleted.'
CONFIRM_DELETE = 'Are you sure you want to delete this post?'


def publish_error(message):
    return f'Publish error: {message}'


def update_error(message):
    return f'Update error: {message}'


def delete_error(message):
    return f'Delete error: {message}'


class FlashNotifier:
    """Notifier backed by flask.flash"""

    def __call__(self, message, category='info'):
        flash(message, category)
