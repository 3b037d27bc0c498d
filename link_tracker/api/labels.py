from flask import request, current_app
from flask_restx import Namespace, Resource

from ..models.api_models import create_models
from . import failure_response

labels_ns = Namespace('labels', path='/api/labels', description='Tag operations')

_, _, label_input, label_model = create_models(labels_ns)


@labels_ns.route('')
class LabelList(Resource):
    @labels_ns.doc('list_labels',
        description='List the labels defined in the backing repository.',
        responses={
            200: 'Success. Returns name and color of each label.',
            500: 'Server error. GitHub rejected the request.'
        })
    @labels_ns.response(200, 'Success', [label_model])
    def get(self):
        """List labels"""
        try:
            labels = current_app.bookmark_service.list_labels()
            return [label.to_dict() for label in labels], 200
        except Exception as e:
            return failure_response(labels_ns, 'fetching labels', e)

    @labels_ns.doc('create_label',
        description='Create a label; a random color is picked when none is given.',
        responses={
            201: 'Label created.',
            400: 'Label name missing.',
            500: 'Server error. GitHub rejected the request.'
        })
    @labels_ns.expect(label_input)
    def post(self):
        """Create a label"""
        try:
            label = current_app.bookmark_service.create_label(request.get_json(silent=True))
            return label.to_dict(), 201
        except Exception as e:
            return failure_response(labels_ns, 'creating label', e)
