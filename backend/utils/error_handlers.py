"""Central translation of raised errors into JSON responses.

Every layer below the routes raises; nothing below here builds error
responses itself.
"""
from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from backend.utils.errors import ApiError, ValidationError


def error_body(error: str, message: str, status_code: int, **extra):
    body = {"error": error, "message": message, "statusCode": status_code}
    body.update(extra)
    return jsonify(body), status_code


def _unauthorized(message: str):
    return error_body("UnauthorizedError", message, 401)


def register_error_handlers(app, jwt) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        app.logger.warning("Validation error on %s %s: %s", request.method, request.path, exc.errors)
        return error_body("Validation Error", exc.message, 400, errors=exc.errors)

    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        app.logger.info("%s on %s %s: %s", exc.name, request.method, request.path, exc.message)
        return error_body(exc.name, exc.message, exc.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        if exc.code == 404:
            return error_body("Not Found", f"Route {request.method}:{request.path} not found", 404)
        return error_body(exc.name, exc.description, exc.code)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_body("Internal Server Error", "Something went wrong", 500)

    # flask-jwt-extended reports auth failures through its own callbacks
    @jwt.unauthorized_loader
    def missing_token(reason: str):
        return _unauthorized(reason)

    @jwt.invalid_token_loader
    def invalid_token(reason: str):
        app.logger.warning("Token verification failed: %s", reason)
        return _unauthorized("Invalid token")

    @jwt.expired_token_loader
    def expired_token(_header, _payload):
        return _unauthorized("Token has expired")
