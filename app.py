from datetime import datetime

from flask import Flask, render_template, session, current_app, Response

from config import Config
from db import get_db, NewsRepository, DatabaseConnectionError, QueryError
from helpers import format_date

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'X-XSS-Protection': '1; mode=block'
}


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # ==================== REQUEST HOOKS ====================
    @app.before_request
    def start_session():
        session.permanent = True

    @app.after_request
    def add_security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response

    @app.errorhandler(DatabaseConnectionError)
    def database_connection_failed(e):
        if app.debug:
            message = f"Database connection failed: {e}"
        else:
            message = "Database connection failed."
        return Response(message, status=500, mimetype='text/plain')

    @app.template_filter('pubdate')
    def pubdate(value):
        return format_date(value)

    # ==================== HOME PAGE ====================
    @app.route('/')
    @app.route('/index')
    def index():
        config = app.config
        repo = NewsRepository(get_db(config))

        try:
            articles = repo.list_published_articles(config['HOMEPAGE_ARTICLE_LIMIT'])
            categories = repo.list_categories()
        except QueryError as e:
            app.logger.warning("Homepage queries failed, rendering empty page: %s", e)
            articles = []
            categories = []
        finally:
            repo.close()

        return render_homepage(articles, categories, config['SITE_NAME'])

    return app


def render_homepage(articles, categories, site_name, year=None):
    """Render the homepage from already-fetched articles and categories."""
    if year is None:
        year = datetime.now().year

    return render_template('index.html',
                           articles=articles,
                           categories=categories,
                           site_name=site_name,
                           article_url=current_app.config['ARTICLE_URL'],
                           year=year)


app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'])
