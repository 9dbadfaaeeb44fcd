"""
tests/test_pages.py
"""
from __future__ import annotations

import json


def test_landing_page_shows_profile_skills_and_projects(client):
    resp = client.get("/")
    html = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "Frontend Developer" in html
    assert html.count('class="skill"') == 6
    assert "TicTacToe" in html
    assert 'href="https://github.com/UgurOz1"' in html


def test_portfolio_file_overrides_defaults(app, client, tmp_path):
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps({"title": "Platform Engineer", "projects": []}), encoding="utf-8")
    app.config["PORTFOLIO_DATA_FILE"] = str(path)

    html = client.get("/").get_data(as_text=True)

    assert "Platform Engineer" in html
    assert "TicTacToe" not in html
    # keys missing from the file keep their defaults
    assert 'class="skill"' in html


def test_missing_portfolio_file_falls_back(app, client, tmp_path):
    app.config["PORTFOLIO_DATA_FILE"] = str(tmp_path / "absent.json")
    assert "Frontend Developer" in client.get("/").get_data(as_text=True)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_sitemap_lists_posts(client):
    resp = client.get("/sitemap.xml")
    xml = resp.get_data(as_text=True)

    assert resp.headers["Content-Type"].startswith("application/xml")
    assert "<loc>http://localhost/blog?post=vite-ile-hizli-gelistirme</loc>" in xml
    assert "<lastmod>2025-04-10</lastmod>" in xml


def test_robots(client):
    text = client.get("/robots.txt").get_data(as_text=True)
    assert "Disallow: /auth/" in text
    assert "Disallow: /blog/composer/" in text
    assert "Sitemap: http://localhost/sitemap.xml" in text


def test_unknown_page_uses_404_template(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert "Page not found." in resp.get_data(as_text=True)


def test_security_headers(client):
    resp = client.get("/")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert "default-src 'self'" in resp.headers["Content-Security-Policy"]
