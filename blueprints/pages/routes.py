"""
Pages Routes - Public pages
"""

from datetime import datetime
from flask import render_template, request, current_app
from extensions import get_service
from utils.data import load_portfolio_data
from . import pages_bp


@pages_bp.route('/')
def index():
    """Landing page - profile, skills and projects"""
    data = load_portfolio_data()
    return render_template('index.html', data=data)


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [
        {'loc': f'{base_url}/', 'changefreq': 'monthly', 'priority': '1.0', 'lastmod': today},
        {'loc': f'{base_url}/blog', 'changefreq': 'weekly', 'priority': '0.9', 'lastmod': today},
    ]

    for post in get_service('posts').list_posts():
        sitemap_entries.append({
            'loc': f"{base_url}/blog?post={post.id}",
            'changefreq': 'monthly',
            'priority': '0.8',
            'lastmod': post.date or today
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"].replace("&", "&amp;")}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /blog
Disallow: /auth/
Disallow: /blog/composer/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
