import pytest

from link_tracker.errors import ApiError
from link_tracker.services.migration_service import MigrationService, CREATE_DELAY_SECONDS

from tests.fakes.github import FakeGitHubClient, make_issue


@pytest.fixture
def source():
    return FakeGitHubClient(
        issues=[make_issue(1, title='One', labels=['docs']), make_issue(2, title='Two')],
        labels=[{'name': 'docs', 'color': '0075ca', 'description': 'Documentation'},
                {'name': 'python', 'color': '3572a5', 'description': None}],
        owner='cgb37', repo='link-tracker',
    )


@pytest.fixture
def target():
    return FakeGitHubClient(labels=[{'name': 'python', 'color': '3572a5', 'description': ''}],
                            owner='cgb37', repo='link-tracker-data')


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def service(source, target, sleeps):
    return MigrationService(source, target, sleep=sleeps.append)


def test_migrate_copies_labels_and_issues(service, source, target, sleeps):
    result = service.migrate()

    assert result.labels_created == 1
    assert result.labels_skipped == 1
    assert result.issues_created == 2
    assert result.issues_closed == 0
    assert result.failures == []
    assert [issue['title'] for issue in target.issues.values()] == ['One', 'Two']
    assert target.issues[1]['body'] == source.issues[1]['body']
    assert [label['name'] for label in target.issues[1]['labels']] == ['docs']
    assert sleeps == [CREATE_DELAY_SECONDS, CREATE_DELAY_SECONDS]
    assert all(issue['state'] == 'open' for issue in source.issues.values())


def test_migrate_can_close_source_issues(service, source):
    result = service.migrate(close_source=True)

    assert result.issues_closed == 2
    assert all(issue['state'] == 'closed' for issue in source.issues.values())


def test_failed_issue_is_skipped_and_not_closed(source, target, sleeps):
    class FlakyTarget(type(target)):
        def create_issue(self, payload):
            if payload['title'] == 'One':
                raise ApiError(500, 'boom')
            return super().create_issue(payload)

    flaky = FlakyTarget(owner='cgb37', repo='link-tracker-data')
    result = MigrationService(source, flaky, sleep=sleeps.append).migrate(close_source=True)

    assert result.issues_created == 1
    assert result.issues_closed == 1
    assert source.issues[1]['state'] == 'open'
    assert source.issues[2]['state'] == 'closed'
    assert len(result.failures) == 1


def test_nothing_to_migrate(target, sleeps):
    empty = FakeGitHubClient(owner='cgb37', repo='link-tracker')

    result = MigrationService(empty, target, sleep=sleeps.append).migrate()

    assert result.to_dict() == {'labels_created': 0, 'labels_skipped': 0, 'issues_created': 0,
                                'issues_closed': 0, 'failures': []}
    assert target.calls == []


def test_source_fetch_failure_propagates(source, service):
    source.fail_with = ApiError(401, 'Bad credentials')

    with pytest.raises(ApiError):
        service.migrate()
