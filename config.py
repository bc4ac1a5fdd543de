import os
from datetime import timedelta

# Database Configuration
DB_HOST = os.getenv('DB_HOST', 'localhost')
DB_NAME = os.getenv('DB_NAME', 'cambotimes')
DB_USER = os.getenv('DB_USER', 'root')
DB_PASS = os.getenv('DB_PASS', '')

# Site Configuration
SITE_NAME = os.getenv('SITE_NAME', 'CamboTimes')
SITE_URL = os.getenv('SITE_URL', 'http://localhost')


class Config:
    """Base configuration, read once when the app is created."""
    DB_HOST = DB_HOST
    DB_NAME = DB_NAME
    DB_USER = DB_USER
    DB_PASS = DB_PASS

    SITE_NAME = SITE_NAME
    SITE_URL = SITE_URL

    # Flask Configuration
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)

    # Homepage
    HOMEPAGE_ARTICLE_LIMIT = 5
    ARTICLE_URL = os.getenv('ARTICLE_URL', 'article.php')


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing-secret-key'
    SITE_NAME = 'Test Times'
