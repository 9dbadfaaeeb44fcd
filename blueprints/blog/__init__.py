"""
Blog Blueprint - Post list, search and the admin composer
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__, url_prefix='/blog')

from . import routes
