"""
Pages Blueprint - Public pages
Handles: Portfolio landing page, sitemap, robots.txt
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
