from flask import current_app
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request


def requester_id() -> str:
    """Identity of the caller for the current request.

    A valid bearer token always wins. Without one, the configured default
    user is used unless AUTH_REQUIRED is set, in which case
    flask-jwt-extended rejects the request with a 401.
    """
    auth_required = current_app.config.get("AUTH_REQUIRED", False)
    verify_jwt_in_request(optional=not auth_required)
    identity = get_jwt_identity()
    if identity is None:
        return current_app.config["DEFAULT_USER_ID"]
    return str(identity)
