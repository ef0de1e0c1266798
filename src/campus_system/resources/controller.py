from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request

from ..auth.tokens import Authenticator
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .service import ResourceService

logger = logging.getLogger(__name__)


def register_resource(app: Flask, service: ResourceService, authenticator: Authenticator) -> None:
    """Bind POST/GET/GET one/PUT/DELETE for one entity.

    Write failures answer 400 and read or delete failures answer 500, both
    with the underlying message. Creation is open; every other route needs a
    bearer token.
    """

    resource = service.resource
    item_path = f"{resource.path}/<record_id>"

    def auth_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.principal = authenticator.authenticate(request)
            except AuthenticationError as e:
                return jsonify({"message": str(e)}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route(resource.path, methods=["POST"], endpoint=f"{resource.name}_create")
    def create():
        try:
            record = service.create(request.get_json(silent=True))
            return jsonify(record), 201
        except ValidationError as e:
            return jsonify({"message": e.messages}), 400
        except Exception as e:
            logger.exception("Creating %s failed", resource.name)
            return jsonify({"message": str(e)}), 400

    @app.route(resource.path, methods=["GET"], endpoint=f"{resource.name}_list")
    @auth_required
    def list_all():
        try:
            return jsonify(service.list()), 200
        except Exception as e:
            logger.exception("Listing %s failed", resource.name)
            return jsonify({"message": str(e)}), 500

    @app.route(item_path, methods=["GET"], endpoint=f"{resource.name}_get")
    @auth_required
    def get_one(record_id: str):
        try:
            return jsonify(service.get(record_id)), 200
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception as e:
            logger.exception("Reading %s %s failed", resource.name, record_id)
            return jsonify({"message": str(e)}), 500

    @app.route(item_path, methods=["PUT"], endpoint=f"{resource.name}_update")
    @auth_required
    def update(record_id: str):
        try:
            record = service.update(record_id, request.get_json(silent=True))
            return jsonify(record), 200
        except ValidationError as e:
            return jsonify({"message": e.messages}), 400
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception as e:
            logger.exception("Updating %s %s failed", resource.name, record_id)
            return jsonify({"message": str(e)}), 400

    @app.route(item_path, methods=["DELETE"], endpoint=f"{resource.name}_delete")
    @auth_required
    def delete(record_id: str):
        try:
            service.delete(record_id)
            return jsonify({"message": resource.deleted_message}), 200
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception as e:
            logger.exception("Deleting %s %s failed", resource.name, record_id)
            return jsonify({"message": str(e)}), 500
