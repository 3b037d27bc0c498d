import pytest

from link_tracker import create_app
from link_tracker.config import TestingConfig

from tests.fakes.clock import FakeClock
from tests.fakes.github import FakeGitHubClient, make_issue


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def github():
    return FakeGitHubClient(
        issues=[
            make_issue(1, title='Flask docs', link='https://flask.palletsprojects.com', labels=['python', 'docs']),
            make_issue(2, title='GitHub REST', link='https://docs.github.com/rest', description='API reference',
                       labels=['docs']),
        ],
        labels=[
            {'id': 1, 'name': 'python', 'color': '3572a5', 'description': 'Python things'},
            {'id': 2, 'name': 'docs', 'color': '0075ca', 'description': None},
        ],
    )


@pytest.fixture
def app(github, clock):
    return create_app(TestingConfig, github_client=github, clock=clock)


@pytest.fixture
def client(app):
    return app.test_client()
