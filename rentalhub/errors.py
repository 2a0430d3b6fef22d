from flask import jsonify, request


class LeaseError(ValueError):
    """Invalid lease input."""

    error = "validation_error"
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class LeaseConflict(LeaseError):
    """The lease or unit is not in a state that allows the operation."""

    error = "conflict"
    status_code = 409


class ApplicationConflict(LeaseConflict):
    """The unit cannot take this application."""


def register_error_handlers(app):
    @app.errorhandler(LeaseError)
    def lease_error(e): return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify(error="bad_request", message=getattr(e, "description", "Bad Request")), 400

    @app.errorhandler(401)
    def unauthorized(e): return jsonify(error="unauthorized"), 401

    @app.errorhandler(403)
    def forbidden(e): return jsonify(error="forbidden"), 403

    @app.errorhandler(404)
    def not_found(e): return jsonify(error="not_found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e): return jsonify(error="method_not_allowed"), 405

    @app.errorhandler(422)
    def unprocessable(e): return jsonify(error="unprocessable"), 422

    @app.errorhandler(500)
    def server_error(e):
        app.logger.exception("Unhandled exception: %s", e)
        return jsonify(error="server_error"), 500


def json_body():
    """The request's JSON object, ``{}`` when absent; non-object bodies are a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LeaseError("Invalid payload")
    return data
