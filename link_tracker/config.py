import os

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()


class Config:
    GITHUB_TOKEN = os.environ.get('GITHUB_TOKEN')
    GITHUB_OWNER = os.environ.get('GITHUB_OWNER')
    GITHUB_REPO = os.environ.get('GITHUB_REPO')
    GITHUB_API = os.environ.get('GITHUB_API') or 'https://api.github.com'
    # seconds, per upstream call
    GITHUB_TIMEOUT = float(os.environ.get('GITHUB_TIMEOUT') or 30)
    BOOKMARK_CACHE_TTL = int(os.environ.get('CACHE_TTL_SECONDS') or 8 * 60 * 60)
    VERIFY_REPOSITORY = True
    WARM_CACHE = True
    LOG_DIR = os.environ.get('LOG_DIR')
    PORT = int(os.environ.get('PORT') or 3333)
    DEBUG = False
    TESTING = False
    CACHE_TYPE = 'SimpleCache'
    CACHE_DEFAULT_TIMEOUT = 300

    @classmethod
    def validate(cls):
        required = ('GITHUB_TOKEN', 'GITHUB_OWNER', 'GITHUB_REPO')
        missing = [name for name in required if not getattr(cls, name)]
        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")


class TestingConfig(Config):
    GITHUB_TOKEN = 'test-token'
    GITHUB_OWNER = 'octocat'
    GITHUB_REPO = 'bookmarks'
    GITHUB_API = 'http://github.test'
    VERIFY_REPOSITORY = False
    WARM_CACHE = False
    LOG_DIR = None
    TESTING = True
    CACHE_TYPE = 'NullCache'
