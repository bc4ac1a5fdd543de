from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from urllib.parse import urlencode

from helpers import parse_datetime, strip_tags

EXCERPT_LENGTH = 150


@dataclass
class Category:
    id: int
    name: str
    slug: str

    @classmethod
    def from_row(cls, row):
        return cls(id=row['id'], name=row['name'], slug=row['slug'])


@dataclass
class Author:
    id: int
    username: str


@dataclass
class Article:
    id: int
    title: str
    slug: str
    content: str = ''
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    status: str = 'published'
    published_at: Optional[datetime] = None
    category: Optional[Category] = None
    author: Optional[Author] = None

    @classmethod
    def from_row(cls, row):
        """Build an article from a row of the articles/categories/users join.

        The category and author are optional: a row with no matching
        category or user carries NULL in the joined columns.
        """
        category = None
        if row.get('category_name') is not None:
            category = Category(
                id=row.get('category_id'),
                name=row['category_name'],
                slug=row.get('category_slug') or ''
            )

        author = None
        if row.get('author_name') is not None:
            author = Author(id=row.get('author_id'), username=row['author_name'])

        return cls(
            id=row['id'],
            title=row['title'],
            slug=row['slug'],
            content=row.get('content') or '',
            excerpt=row.get('excerpt'),
            featured_image=row.get('featured_image'),
            status=row.get('status', 'published'),
            published_at=parse_datetime(row.get('published_at')),
            category=category,
            author=author
        )

    @property
    def author_name(self):
        if self.author and self.author.username:
            return self.author.username
        return 'Unknown'

    @property
    def category_name(self):
        return self.category.name if self.category else None

    @property
    def summary(self):
        """Stored excerpt, or the start of the plain-text content"""
        if self.excerpt:
            return self.excerpt
        return strip_tags(self.content)[:EXCERPT_LENGTH] + '...'

    def detail_url(self, base='article.php'):
        return f"{base}?{urlencode({'slug': self.slug})}"
