import argparse
import logging
import os
import sys

from link_tracker import create_app, LOG_FORMAT
from link_tracker.config import Config
from link_tracker.errors import ConfigurationError, LinkTrackerError
from link_tracker.services.github_client import GitHubClient
from link_tracker.services.migration_service import MigrationService

logger = logging.getLogger('link_tracker')


def serve(args):
    try:
        app = create_app()
    except ConfigurationError as e:
        logger.error(e.message)
        return 1
    if args.debug:
        app.logger.setLevel(logging.DEBUG)
    port = args.port or app.config['PORT']
    logger.info(f"Link Tracker running at http://localhost:{port}")
    app.run(debug=args.debug, port=port, threaded=True)
    return 0


def migrate(args):
    try:
        Config.validate()
        if not args.target_repo:
            raise ConfigurationError('TARGET_GITHUB_REPO is not set; pass --target-repo')
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    def client(owner, repo):
        return GitHubClient(Config.GITHUB_TOKEN, owner, repo, api_base=Config.GITHUB_API,
                            timeout=Config.GITHUB_TIMEOUT)

    source = client(Config.GITHUB_OWNER, Config.GITHUB_REPO)
    target = client(args.target_owner or Config.GITHUB_OWNER, args.target_repo)
    try:
        result = MigrationService(source, target).migrate(close_source=args.close_source)
    except LinkTrackerError as e:
        logger.error(f"Migration failed: {e.message}")
        return 1

    logger.info(f"Migration completed: {result.to_dict()}")
    logger.info(f"Update your .env to use the new data repository: "
                f"GITHUB_OWNER={target.owner} GITHUB_REPO={target.repo}")
    return 1 if result.failures else 0


def build_parser():
    parser = argparse.ArgumentParser(description='Link Tracker: bookmarks stored as GitHub issues')
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    parser.set_defaults(func=serve, port=None)
    subparsers = parser.add_subparsers(dest='command')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--port', type=int, default=None, help='Port to run the server on')
    serve_parser.add_argument('--debug', action='store_true', default=argparse.SUPPRESS, help='Run in debug mode')
    serve_parser.set_defaults(func=serve)

    migrate_parser = subparsers.add_parser('migrate', help='Copy bookmarks and labels to another repository')
    migrate_parser.add_argument('--target-owner', default=os.environ.get('TARGET_GITHUB_OWNER'), help='Owner of the target repository')
    migrate_parser.add_argument('--target-repo', default=os.environ.get('TARGET_GITHUB_REPO'), help='Name of the target repository')
    migrate_parser.add_argument('--close-source', action='store_true',
                                help='Close the source issues after they are copied')
    migrate_parser.set_defaults(func=migrate)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format=LOG_FORMAT)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
