"""
Search Module - Client-side style filtering of the loaded post list
"""


def filter_posts(posts, query):
    """
    Keep posts whose title, excerpt or any tag contains the query.

    Matching is case-insensitive on the trimmed query; an empty query
    returns the list as is. Order is preserved.
    """
    needle = (query or '').strip().lower()
    if not needle:
        return list(posts)
    return [
        post for post in posts
        if any(needle in field.lower() for field in (post.title, post.excerpt, *post.tags))
    ]


def select_post(posts, post_id=None):
    """The post to display: the one with `post_id`, else the first one"""
    if post_id:
        return next((post for post in posts if post.id == post_id), None)
    return posts[0] if posts else None
