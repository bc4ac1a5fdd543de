"""Example configuration (safe to commit).
Copy this to `config.py` and fill in real values locally, or export the
matching environment variables (DB_HOST, DB_NAME, DB_USER, DB_PASS,
SITE_NAME, SITE_URL, SECRET_KEY, DEBUG).
"""
from datetime import timedelta


class Config:
    DB_HOST = 'localhost'
    DB_NAME = 'cambotimes'
    DB_USER = 'root'
    DB_PASS = 'your_db_password'

    SITE_NAME = 'CamboTimes'
    SITE_URL = 'https://www.example.com'

    # Replace with a secure random string in production
    SECRET_KEY = 'change-me-to-a-secure-random-value'
    DEBUG = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)

    HOMEPAGE_ARTICLE_LIMIT = 5
    ARTICLE_URL = 'article.php'
