from datetime import datetime

from bs4 import BeautifulSoup
from flask import abort, redirect as redirect_response
from markupsafe import escape


def strip_tags(html):
    """Remove HTML tags, keeping only the text"""
    if not html:
        return ''
    return BeautifulSoup(html, "html.parser").get_text()


def sanitize(data):
    """Trim, strip tags and HTML-escape untrusted text"""
    return str(escape(strip_tags((data or '').strip())))


def redirect(url):
    """Send a redirect to `url` and stop handling the current request"""
    abort(redirect_response(url))


def parse_datetime(value):
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


def format_date(value):
    """Format a timestamp as e.g. 'Mar 05, 2024'"""
    dt = parse_datetime(value)
    if dt is None:
        return ''
    return dt.strftime('%b %d, %Y')
