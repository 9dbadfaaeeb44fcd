"""
Data Module - Static site content
Seed blog posts shown when the post store is empty or unreachable,
and the portfolio profile rendered on the landing page.
"""

import copy
import json
import os
from flask import current_app
from models import Post


SEED_POSTS = [
    {
        'id': 'react-performans-ipuclari',
        'title': 'React + TypeScript ile performans ipuçları',
        'date': '2025-05-01',
        'tags': ['React', 'TypeScript', 'Performans'],
        'excerpt': (
            'Memoization, kod bölme ve uygun durum yönetimi ile arayüzlerinizi nasıl '
            'hızlandırabileceğinizi anlatıyorum.'
        ),
        'content': (
            'Bileşenlerin yeniden render edilme sayısını azaltmak için useMemo/useCallback ve '
            'React.memo kullanımı, dinamik import ile kod bölme, liste renderlarında key ve sanal '
            'listeleme gibi yöntemleri uygulamak büyük fark yaratır. Ayrıca server state ile client '
            'state ayrımını netleştirmek uygulamayı sadeleştirir.'
        ),
    },
    {
        'id': 'tailwind-ile-tasarim-sistemi',
        'title': 'Tailwind CSS ile tasarım sistemi kurmak',
        'date': '2025-04-10',
        'tags': ['Tailwind', 'Design System'],
        'excerpt': (
            'Token tabanlı renkler, tipografi ölçekleri ve yardımcı sınıflarla tutarlı bir sistem '
            'kurma yaklaşımı.'
        ),
        'content': (
            'Renkler, aralıklar ve tipografi gibi temel tasarım tokenlarını tailwind.config içinde '
            'genişletmek; bileşenlere anlamlı yardımcı sınıflar atamak ve varyantları (hover, focus, '
            'aria) standartlaştırmak hızlı ve tutarlı arayüz üretir.'
        ),
    },
    {
        'id': 'vite-ile-hizli-gelistirme',
        'title': 'Vite ile hızlı geliştirme deneyimi',
        'date': '2025-03-15',
        'tags': ['Vite', 'Build Tools', 'Developer Experience'],
        'excerpt': (
            'ES modules tabanlı bundler ile geliştirme sürecini nasıl hızlandırabileceğinizi '
            'gösteriyorum.'
        ),
        'content': (
            'Vite, geliştirme sunucusunda ES modules kullanarak sadece değişen dosyaları yeniden '
            'yükler. Bu sayede büyük projelerde bile hot reload süresi milisaniyeler seviyesinde '
            'kalır. Production build için Rollup kullanarak optimize edilmiş bundle üretir.'
        ),
    },
]


def get_seed_posts():
    """Fresh Post objects for the fallback list"""
    return [Post.from_document(item['id'], item) for item in SEED_POSTS]


DEFAULT_PORTFOLIO = {
    'name': 'Uğur Öz',
    'title': 'Frontend Developer',
    'about': (
        'I build fast, accessible web interfaces with React and TypeScript, '
        'and write about what I learn along the way.'
    ),
    'skills': [
        {'label': 'React', 'level': 70},
        {'label': 'TypeScript', 'level': 70},
        {'label': 'Tailwind CSS', 'level': 70},
        {'label': 'Java', 'level': 50},
        {'label': 'Python', 'level': 70},
        {'label': 'Git', 'level': 80},
    ],
    'projects': [
        {'title': 'restoran-App', 'description': 'No description yet.', 'tags': ['TypeScript'],
         'stars': 0, 'code': 'https://github.com/UgurOz1/restoran-App'},
        {'title': 'To-Do-List', 'description': 'No description yet.', 'tags': ['TypeScript'],
         'stars': 0, 'code': 'https://github.com/UgurOz1/To-Do-List'},
        {'title': 'TechBlog', 'description': 'No description yet.', 'tags': ['Python'],
         'stars': 0, 'code': 'https://github.com/UgurOz1/TechBlog'},
        {'title': 'mucize_komur_evi', 'description': 'No description yet.', 'tags': ['CSS'],
         'stars': 0, 'demo': 'https://uguroz1.github.io/mucize_komur_evi/',
         'code': 'https://github.com/UgurOz1/mucize_komur_evi'},
        {'title': 'TicTacToe', 'description': 'A simple TicTacToe game developed with Java',
         'tags': ['Java'], 'stars': 0, 'code': 'https://github.com/UgurOz1/TicTacToe'},
    ],
    'contact': {
        'email': 'uguro9319@gmail.com',
    },
    'social': {
        'github': 'https://github.com/UgurOz1',
    },
}


def get_default_portfolio_data():
    """Return the built-in portfolio profile"""
    return copy.deepcopy(DEFAULT_PORTFOLIO)


def load_portfolio_data(path=None):
    """
    Load the portfolio profile.
    Reads PORTFOLIO_DATA_FILE when configured, keys missing from the file
    fall back to the built-in profile.

    Args:
        path (str, optional): JSON file overriding the configured path

    Returns:
        dict: Portfolio profile (name, title, about, skills, projects, contact, social)
    """
    data = get_default_portfolio_data()
    path = path or current_app.config.get('PORTFOLIO_DATA_FILE')
    if not path:
        return data

    try:
        if os.path.exists(path):
            with open(path, 'r', encoding='utf-8') as file:
                data.update(json.load(file))
        else:
            current_app.logger.warning(f"Portfolio data file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        current_app.logger.error(f"Error loading portfolio data: {str(e)}")
    return data
