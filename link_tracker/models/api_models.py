from flask_restx import fields


def create_models(api):
    bookmark_input = api.model('BookmarkInput', {
        'title': fields.String(required=True, description='The bookmark title'),
        'link': fields.String(required=True, description='The bookmarked URL'),
        'description': fields.String(description='Free text description'),
        'tags': fields.List(fields.String, description='Tag names, stored as issue labels')
    })

    bookmark_model = api.model('Bookmark', {
        'id': fields.Integer(description='Number of the backing issue'),
        'title': fields.String(description='The bookmark title'),
        'link': fields.String(description='The bookmarked URL'),
        'description': fields.String(description='Free text description'),
        'tags': fields.List(fields.String, description='Tag names'),
        'created': fields.String(description='Issue creation time'),
        'updated': fields.String(description='Issue update time'),
        'state': fields.String(description='open or closed'),
        'url': fields.String(description='Web URL of the backing issue')
    })

    label_input = api.model('LabelInput', {
        'name': fields.String(required=True, description='Label name'),
        'color': fields.String(description='Six hex digits; random when omitted')
    })

    label_model = api.model('Label', {
        'name': fields.String(description='Label name'),
        'color': fields.String(description='Six hex digits')
    })

    return bookmark_input, bookmark_model, label_input, label_model
