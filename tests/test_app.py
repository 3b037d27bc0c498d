import logging

import pytest

from link_tracker import create_app
from link_tracker.config import TestingConfig
from link_tracker.errors import ApiError, ConfigurationError

from tests.fakes.github import FakeGitHubClient


class MissingTokenConfig(TestingConfig):
    GITHUB_TOKEN = None


class MissingRepoConfig(TestingConfig):
    GITHUB_OWNER = ''
    GITHUB_REPO = None


class VerifyingConfig(TestingConfig):
    VERIFY_REPOSITORY = True


def test_missing_token_refuses_to_start():
    with pytest.raises(ConfigurationError) as excinfo:
        create_app(MissingTokenConfig, github_client=FakeGitHubClient())
    assert 'GITHUB_TOKEN' in excinfo.value.message


def test_missing_owner_and_repo_are_named():
    with pytest.raises(ConfigurationError) as excinfo:
        MissingRepoConfig.validate()
    assert 'GITHUB_OWNER' in excinfo.value.message
    assert 'GITHUB_REPO' in excinfo.value.message


def test_repository_is_verified_at_startup():
    github = FakeGitHubClient()

    create_app(VerifyingConfig, github_client=github)

    assert github.call_names() == ['get_repository']


def test_unreachable_repository_refuses_to_start():
    github = FakeGitHubClient()
    github.fail_with = ApiError(404, 'Not Found')

    with pytest.raises(ConfigurationError) as excinfo:
        create_app(VerifyingConfig, github_client=github)
    assert 'octocat/bookmarks' in excinfo.value.message


def test_file_logging(tmp_path):
    class FileLoggingConfig(TestingConfig):
        LOG_DIR = str(tmp_path / 'logs')

    create_app(FileLoggingConfig, github_client=FakeGitHubClient())

    assert (tmp_path / 'logs' / 'link_tracker.log').exists()


@pytest.fixture(autouse=True)
def _drop_file_handlers():
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, logging.FileHandler)]:
        root.removeHandler(handler)
        handler.close()
