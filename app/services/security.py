from functools import wraps

from flask import current_app
from flask_login import current_user
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from app.errors import Forbidden
from app.models import User


def _auth_serializer():
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"])


def generate_auth_token(auth_id):
    return _auth_serializer().dumps(auth_id, salt="api-auth")


def verify_auth_token(token, max_age=None):
    if max_age is None:
        max_age = current_app.config["AUTH_TOKEN_MAX_AGE"]
    try:
        return _auth_serializer().loads(token, salt="api-auth", max_age=max_age)
    except (BadSignature, SignatureExpired):
        return None


def load_user_from_token(token):
    auth_id = verify_auth_token(token)
    if not auth_id:
        return None
    return User.query.filter_by(auth_id=auth_id).first()


def eboard_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_user.is_eboard:
            raise Forbidden("Executive board access required")
        return view(*args, **kwargs)

    return wrapper


def require_self_or_eboard(user_id):
    if current_user.id != user_id and not current_user.is_eboard:
        raise Forbidden("Not allowed to access another member's records")
