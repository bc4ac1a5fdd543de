# tests/conftest.py

import mysql.connector
import pytest

from app import create_app
from config import TestingConfig


class FakeCursor:
    """Answers the homepage queries from the rows held by a FakeDatabase."""

    def __init__(self, db, prepared=False, dictionary=False):
        self.db = db
        self.prepared = prepared
        self.dictionary = dictionary
        self._rows = []
        self.closed = False

    def execute(self, query, params=()):
        self.db.executed.append((query, params))
        if self.db.query_error is not None and (
                self.db.query_error_on is None or self.db.query_error_on in query):
            raise self.db.query_error
        if 'FROM articles' in query:
            self._rows = self.db.published_articles(params[0])
        elif 'FROM categories' in query:
            self._rows = sorted(self.db.categories, key=lambda c: c['name'])
        else:
            raise mysql.connector.ProgrammingError(msg=f"Unexpected query: {query}")

    def fetchall(self):
        return [dict(row) for row in self._rows]

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, db):
        self.db = db
        self.closed = False
        self.cursors = []

    def cursor(self, prepared=False, dictionary=False):
        if self.db.cursor_error is not None:
            raise self.db.cursor_error
        cursor = FakeCursor(self.db, prepared=prepared, dictionary=dictionary)
        self.cursors.append(cursor)
        return cursor

    def close(self):
        self.closed = True


class FakeDatabase:
    """In-memory stand-in for the articles, categories and users tables."""

    def __init__(self):
        self.articles = []
        self.categories = []
        self.users = []
        self.connections = []
        self.connect_kwargs = None
        self.executed = []
        self.connect_error = None
        self.query_error = None
        # Only queries containing this text fail; None fails every query
        self.query_error_on = None
        self.cursor_error = None

    def connect(self, **kwargs):
        self.connect_kwargs = kwargs
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn

    def add_category(self, name, slug=None):
        category = {'id': len(self.categories) + 1, 'name': name,
                    'slug': slug or name.lower()}
        self.categories.append(category)
        return category

    def add_user(self, username):
        user = {'id': len(self.users) + 1, 'username': username}
        self.users.append(user)
        return user

    def add_article(self, title, published_at, status='published', **fields):
        article = {
            'id': len(self.articles) + 1,
            'title': title,
            'slug': fields.pop('slug', title.lower().replace(' ', '-')),
            'content': fields.pop('content', f"<p>{title} body</p>"),
            'excerpt': fields.pop('excerpt', None),
            'featured_image': fields.pop('featured_image', None),
            'status': status,
            'category_id': fields.pop('category_id', None),
            'author_id': fields.pop('author_id', None),
            'published_at': published_at,
        }
        article.update(fields)
        self.articles.append(article)
        return article

    def published_articles(self, limit):
        categories = {c['id']: c for c in self.categories}
        users = {u['id']: u for u in self.users}
        rows = []
        for article in self.articles:
            if article['status'] != 'published':
                continue
            category = categories.get(article['category_id'], {})
            user = users.get(article['author_id'], {})
            row = dict(article)
            row['category_name'] = category.get('name')
            row['category_slug'] = category.get('slug')
            row['author_name'] = user.get('username')
            rows.append(row)
        rows.sort(key=lambda r: (r['published_at'], r['id']), reverse=True)
        return rows[:limit]


@pytest.fixture
def fake_db(monkeypatch):
    db = FakeDatabase()
    monkeypatch.setattr(mysql.connector, 'connect', db.connect)
    return db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app, fake_db):
    return app.test_client()

