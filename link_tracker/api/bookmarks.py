from flask import request, current_app
from flask_restx import Namespace, Resource

from ..models.api_models import create_models
from . import failure_response

bookmarks_ns = Namespace('bookmarks', path='/api/bookmarks', description='Bookmark operations')

bookmark_input, bookmark_model, _, _ = create_models(bookmarks_ns)


def _service():
    return current_app.bookmark_service


@bookmarks_ns.route('')
class BookmarkList(Resource):
    @bookmarks_ns.doc('list_bookmarks',
        description='List open bookmarks, answered from the cache while it is fresh.',
        params={'q': 'Case-insensitive text to search for', 'tag': 'Only bookmarks with this tag'},
        responses={
            200: 'Success. Returns the bookmarks.',
            500: 'Server error. GitHub could not be reached and nothing is cached.'
        })
    @bookmarks_ns.response(200, 'Success', [bookmark_model])
    def get(self):
        """List bookmarks"""
        try:
            bookmarks = _service().list_bookmarks(query=request.args.get('q'), tag=request.args.get('tag'))
            return [b.to_dict() for b in bookmarks], 200
        except Exception as e:
            return failure_response(bookmarks_ns, 'fetching bookmarks', e)

    @bookmarks_ns.doc('create_bookmark',
        description='Create a bookmark as a new issue in the backing repository.',
        responses={
            201: 'Bookmark created.',
            400: 'Title or link missing.',
            500: 'Server error. GitHub rejected the request.'
        })
    @bookmarks_ns.expect(bookmark_input)
    def post(self):
        """Create a bookmark"""
        try:
            bookmark = _service().create_bookmark(request.get_json(silent=True) or {})
            return bookmark.to_dict(), 201
        except Exception as e:
            return failure_response(bookmarks_ns, 'creating bookmark', e)


@bookmarks_ns.route('/refresh')
class BookmarkRefresh(Resource):
    @bookmarks_ns.doc('refresh_bookmarks',
        description='Refetch all open issues from GitHub, ignoring the cache TTL.',
        responses={
            200: 'Cache refreshed.',
            500: 'Server error. GitHub could not be reached and nothing is cached.'
        })
    def post(self):
        """Force a refresh from GitHub"""
        try:
            return _service().refresh(), 200
        except Exception as e:
            return failure_response(bookmarks_ns, 'refreshing bookmarks', e)


@bookmarks_ns.route('/<int:bookmark_id>')
@bookmarks_ns.param('bookmark_id', 'Number of the backing issue')
class BookmarkItem(Resource):
    @bookmarks_ns.doc('update_bookmark',
        description='Replace every field of a bookmark.',
        responses={
            200: 'Bookmark updated.',
            400: 'Title or link missing.',
            500: 'Server error. GitHub rejected the request.'
        })
    @bookmarks_ns.expect(bookmark_input)
    def put(self, bookmark_id):
        """Update a bookmark"""
        try:
            bookmark = _service().update_bookmark(bookmark_id, request.get_json(silent=True) or {})
            return bookmark.to_dict(), 200
        except Exception as e:
            return failure_response(bookmarks_ns, 'updating bookmark', e)

    @bookmarks_ns.doc('delete_bookmark',
        description='Close the backing issue; the bookmark leaves the active set.',
        responses={
            200: 'Bookmark deleted.',
            500: 'Server error. GitHub rejected the request.'
        })
    def delete(self, bookmark_id):
        """Delete a bookmark"""
        try:
            return _service().delete_bookmark(bookmark_id), 200
        except Exception as e:
            return failure_response(bookmarks_ns, 'deleting bookmark', e)
