from main import build_parser, migrate, serve


def test_default_command_is_serve():
    args = build_parser().parse_args([])

    assert args.func is serve
    assert args.port is None


def test_migrate_arguments():
    args = build_parser().parse_args(['migrate', '--target-owner', 'me', '--target-repo', 'data', '--close-source'])

    assert args.func is migrate
    assert (args.target_owner, args.target_repo, args.close_source) == ('me', 'data', True)


def test_migrate_without_target_repo_fails(monkeypatch):
    from link_tracker.config import Config
    monkeypatch.setattr(Config, 'GITHUB_TOKEN', 'token')
    monkeypatch.setattr(Config, 'GITHUB_OWNER', 'octocat')
    monkeypatch.setattr(Config, 'GITHUB_REPO', 'bookmarks')
    args = build_parser().parse_args(['migrate', '--target-repo', ''])

    assert migrate(args) == 1


def test_debug_flag_after_serve():
    args = build_parser().parse_args(['serve', '--debug', '--port', '4000'])

    assert args.func is serve
    assert args.debug is True
    assert args.port == 4000


def test_debug_flag_before_serve():
    args = build_parser().parse_args(['--debug', 'serve'])

    assert args.debug is True
