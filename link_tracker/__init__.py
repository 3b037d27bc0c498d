import logging
import os
import time
from threading import Thread

from flask import Flask
from flask_caching import Cache
from flask_cors import CORS
from flask_restx import Api
from werkzeug.exceptions import HTTPException

from .api.bookmarks import bookmarks_ns
from .api.labels import labels_ns
from .config import Config
from .errors import ConfigurationError, LinkTrackerError
from .services.bookmark_cache import BookmarkCache
from .services.bookmark_service import BookmarkService
from .services.github_client import GitHubClient

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def create_app(config_class=Config, github_client=None, clock=time.time):
    config_class.validate()

    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_file_logging(app.config.get('LOG_DIR'))

    CORS(app, resources={r"/*": {
        "origins": "*",
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
    }})

    cache = Cache(app)

    api = Api(app, version='1.0', title='Link Tracker API',
              description='Bookmarks stored as GitHub issues, tags as labels', doc='/docs')

    client = github_client or GitHubClient(
        token=app.config['GITHUB_TOKEN'],
        owner=app.config['GITHUB_OWNER'],
        repo=app.config['GITHUB_REPO'],
        api_base=app.config['GITHUB_API'],
        timeout=app.config['GITHUB_TIMEOUT'],
    )

    if app.config['VERIFY_REPOSITORY']:
        _verify_repository(client)

    bookmark_cache = BookmarkCache(client, ttl=app.config['BOOKMARK_CACHE_TTL'], clock=clock)
    app.bookmark_service = BookmarkService(client, bookmark_cache)

    api.add_namespace(bookmarks_ns)
    api.add_namespace(labels_ns)

    @api.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return {'error': e.description}, e.code
        if isinstance(e, LinkTrackerError):
            return {'error': e.message}, e.status_code
        app.logger.error(f'An unhandled exception occurred: {str(e)}')
        return {'error': str(e)}, 500

    @app.route('/status')
    @cache.cached(timeout=10)
    def status():
        last_refresh = bookmark_cache.last_refresh
        return {
            "status": "ready",
            "repository": f"{client.owner}/{client.repo}",
            "cached_bookmarks": len(bookmark_cache.items),
            "last_refresh": time.strftime('%Y-%m-%dT%H:%M:%SZ', time.gmtime(last_refresh)) if last_refresh else None,
        }, 200

    if app.config['WARM_CACHE']:
        Thread(target=_warm_cache, args=(bookmark_cache,), daemon=True).start()

    return app


def _verify_repository(client):
    logger.info(f"Verifying GitHub repository: {client.owner}/{client.repo}")
    try:
        client.get_repository()
    except LinkTrackerError as e:
        raise ConfigurationError(
            f"Repository verification failed for {client.owner}/{client.repo}: {e.message}") from e
    logger.info(f"Repository verification successful: {client.owner}/{client.repo}")


def _warm_cache(bookmark_cache):
    try:
        bookmark_cache.get_all()
    except LinkTrackerError as e:
        logger.error(f"Initial fetch failed: {e.message}. Will retry when the API is called")


def _configure_file_logging(log_dir):
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    path = os.path.join(log_dir, 'link_tracker.log')
    root = logging.getLogger()
    if any(isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(path) for h in root.handlers):
        return
    handler = logging.FileHandler(path)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
