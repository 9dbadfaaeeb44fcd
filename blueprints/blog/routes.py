"""
Blog Routes - Post list, search and the admin composer
Handles: Listing/searching posts, composer open/edit/cancel/submit, delete with confirmation
"""

from flask import render_template, session, redirect, url_for, request, abort, current_app
from extensions import get_service
from utils.composer import PostComposer
from utils.decorators import login_required, admin_required
from utils.notifications import CONFIRM_DELETE, DENIED_DELETE
from utils.search import filter_posts, select_post
from . import blog_bp


def _load_composer():
    return PostComposer.load(session, default_tags=current_app.config['COMPOSER_DEFAULT_TAGS'])


def _can_write():
    """Authorization for the current identity, evaluated once per identity change"""
    if session.get('can_write') is None:
        tracker = get_service('tracker')
        session['can_write'] = get_service('authorization').check(tracker.current)
    return session['can_write']


def _sign_in_options():
    """What the sign-in panel can offer: the browser pop-up flow, the hosted redirect, or neither"""
    config = current_app.config
    firebase_web = None
    if config.get('FIREBASE_WEB_API_KEY'):
        project_id = config.get('FIREBASE_PROJECT_ID')
        firebase_web = {
            'api_key': config['FIREBASE_WEB_API_KEY'],
            'auth_domain': config.get('FIREBASE_AUTH_DOMAIN') or (f"{project_id}.firebaseapp.com" if project_id else ''),
            'project_id': project_id or '',
        }
    return {
        'firebase_web': firebase_web,
        'redirect_sign_in': bool(get_service('auth_provider').redirect_url),
    }


def _find_post(post_id):
    post = select_post(get_service('posts').list_posts(), post_id)
    if post is None:
        abort(404)
    return post


@blog_bp.route('/', strict_slashes=False)
def index():
    """Blog page: searchable list, selected post and the composer panel"""
    query = request.args.get('q', '')
    posts = get_service('posts').list_posts()
    composer = _load_composer()

    return render_template('blog/index.html',
                           posts=filter_posts(posts, query),
                           active=select_post(posts, request.args.get('post')),
                           query=query,
                           composer=composer,
                           panel=composer.panel_state(_can_write()),
                           **_sign_in_options())


@blog_bp.route('/composer/toggle', methods=['POST'])
@login_required
def toggle_composer():
    """Show or hide the new-post form"""
    composer = _load_composer()
    composer.toggle()
    composer.save(session)
    return redirect(url_for('blog.index'))


@blog_bp.route('/posts/<post_id>/edit')
@login_required
def edit_post(post_id):
    """Open the composer pre-filled with an existing post"""
    post = _find_post(post_id)
    composer = _load_composer()
    composer.begin_edit(post)
    composer.save(session)
    return redirect(url_for('blog.index', post=post.id))


@blog_bp.route('/composer/cancel', methods=['POST'])
def cancel_composer():
    """Discard the form without writing"""
    composer = _load_composer()
    composer.cancel()
    composer.save(session)
    return redirect(url_for('blog.index'))


@blog_bp.route('/composer/submit', methods=['POST'])
def submit_composer():
    """Publish or update depending on the composer mode"""
    composer = _load_composer()
    composer.set_fields(
        title=request.form.get('title', ''),
        tags=request.form.get('tags', ''),
        content=request.form.get('content', ''))
    composer.submit(get_service('posts'), get_service('tracker').current)
    composer.save(session)
    return redirect(url_for('blog.index'))


@blog_bp.route('/posts/<post_id>/delete', methods=['GET'])
@login_required
@admin_required(DENIED_DELETE)
def confirm_delete(post_id):
    """Ask before deleting"""
    post = _find_post(post_id)
    return render_template('blog/confirm_delete.html', post=post, prompt=CONFIRM_DELETE)


@blog_bp.route('/posts/<post_id>/delete', methods=['POST'])
def delete_post(post_id):
    """Delete once the confirmation form answered yes"""
    answer = request.form.get('confirm', '').lower()
    get_service('posts').delete(
        get_service('tracker').current,
        post_id,
        confirm=lambda prompt: answer == 'yes')
    return redirect(url_for('blog.index'))
