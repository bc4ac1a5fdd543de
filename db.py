import logging

import mysql.connector

from models import Article, Category

logger = logging.getLogger(__name__)

ARTICLES_QUERY = """
    SELECT a.*, c.name AS category_name, c.slug AS category_slug,
           u.username AS author_name
    FROM articles a
    LEFT JOIN categories c ON a.category_id = c.id
    LEFT JOIN users u ON a.author_id = u.id
    WHERE a.status = 'published'
    ORDER BY a.published_at DESC, a.id DESC
    LIMIT %s
"""

CATEGORIES_QUERY = "SELECT * FROM categories ORDER BY name"


class DatabaseError(Exception):
    pass


class DatabaseConnectionError(DatabaseError):
    """The database could not be reached at all"""


class QueryError(DatabaseError):
    """A query failed on an open connection"""


# Database connection
def get_db(config):
    try:
        return mysql.connector.connect(
            host=config['DB_HOST'],
            database=config['DB_NAME'],
            user=config['DB_USER'],
            password=config['DB_PASS'],
            charset='utf8mb4'
        )
    except mysql.connector.Error as e:
        logger.error("Database connection failed: %s", e)
        raise DatabaseConnectionError(str(e)) from e


class NewsRepository:
    """Read-only access to the published articles and categories"""

    def __init__(self, conn):
        self.conn = conn

    def _fetch_all(self, query, params=()):
        # Rows come back as dicts; prepared=True runs real server-side statements
        cursor = None
        try:
            cursor = self.conn.cursor(prepared=True, dictionary=True)
            cursor.execute(query, params)
            return cursor.fetchall()
        except mysql.connector.Error as e:
            raise QueryError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    def list_published_articles(self, limit=5):
        rows = self._fetch_all(ARTICLES_QUERY, (limit,))
        return [Article.from_row(row) for row in rows]

    def list_categories(self):
        rows = self._fetch_all(CATEGORIES_QUERY)
        return [Category.from_row(row) for row in rows]

    def close(self):
        self.conn.close()
