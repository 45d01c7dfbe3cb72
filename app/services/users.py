import re

from flask import current_app

from app.errors import InvalidArgument, NotFound
from app.extensions import db
from app.models import Role, User
from app.models.enums import RoleType
from app.services.validation import require_choice, require_id, require_text

NUID_PATTERN = re.compile(r"\d{9}")

USER_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "nuid": "nuid",
}

UNIQUE_FIELDS = (("email", "email"), ("nuid", "nuid"), ("auth_id", "authId"))


def normalize_email(email):
    return require_text(email, "email").lower()


def list_users():
    return User.query.order_by(User.last_name, User.first_name).all()


def get_user(user_id):
    user_id = require_id(user_id, "userId")
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def _find_one(**criteria):
    user = User.query.filter_by(**criteria).first()
    if user is None:
        raise NotFound("User not found")
    return user


def get_user_by_email(email):
    return _find_one(email=normalize_email(email))


def get_user_by_nuid(nuid):
    return _find_one(nuid=require_text(nuid, "nuid"))


def get_user_by_auth_id(auth_id):
    return _find_one(auth_id=require_id(auth_id, "authId"))


def get_or_create_role(role_type):
    role = Role.query.filter_by(role_type=role_type.value).first()
    if role is None:
        role = Role(role_type=role_type.value)
        db.session.add(role)
        db.session.flush()
    return role


def _ensure_unique(user, exclude_id=None):
    with db.session.no_autoflush:
        for attr, label in UNIQUE_FIELDS:
            value = getattr(user, attr)
            if value is None:
                continue
            query = User.query.filter(getattr(User, attr) == value)
            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)
            if query.first() is not None:
                db.session.rollback()
                raise InvalidArgument(f"An account with this {label} already exists")


def create_user(data):
    missing = [key for key in ("email", "firstName", "lastName", "nuid") if not data.get(key)]
    if missing:
        raise InvalidArgument(f"Missing required fields: {', '.join(missing)}")

    role_id = data.get("roleId")
    if role_id:
        role = db.session.get(Role, require_id(role_id, "roleId"))
        if role is None:
            raise NotFound("Role not found")
    else:
        role = get_or_create_role(RoleType.MEMBER)

    user = User(
        email=normalize_email(data["email"]),
        first_name=require_text(data["firstName"], "firstName"),
        last_name=require_text(data["lastName"], "lastName"),
        nuid=require_text(data["nuid"], "nuid"),
        auth_id=data.get("authId") or None,
        role_id=role.id,
    )
    _ensure_unique(user)

    db.session.add(user)
    db.session.commit()
    current_app.logger.info("Created user %s with role %s", user.id, role.role_type)
    return user


def update_user(user_id, updates):
    user = get_user(user_id)

    if "email" in updates:
        user.email = normalize_email(updates["email"])
    for key, attr in USER_FIELDS.items():
        if key in updates:
            setattr(user, attr, require_text(updates[key], key))
    if "roleId" in updates:
        role = db.session.get(Role, require_id(updates["roleId"], "roleId"))
        if role is None:
            raise NotFound("Role not found")
        user.role_id = role.id

    _ensure_unique(user, exclude_id=user.id)
    db.session.commit()
    return user


def delete_user(user_id):
    user = get_user(user_id)
    db.session.delete(user)
    db.session.commit()
    current_app.logger.info("Deleted user %s", user_id)


def validate_nuid(nuid, first_name, last_name):
    if not nuid or not first_name or not last_name:
        raise InvalidArgument("Missing required fields: nuid, firstName, lastName")
    if not NUID_PATTERN.fullmatch(nuid):
        raise InvalidArgument("Invalid NUID format. Must be exactly 9 digits.")

    user = User.query.filter_by(nuid=nuid).first()
    if user is None:
        raise InvalidArgument("No user found with this NUID")

    if (
        user.first_name.lower() != first_name.lower()
        or user.last_name.lower() != last_name.lower()
    ):
        raise InvalidArgument("NUID does not match the provided name")
    return user


def list_roles():
    return Role.query.all()


def create_role(role_type):
    role_type = require_choice(role_type, RoleType, "roleType")
    if Role.query.filter_by(role_type=role_type.value).first() is not None:
        raise InvalidArgument(f"Role {role_type.value} already exists")
    role = Role(role_type=role_type.value)
    db.session.add(role)
    db.session.commit()
    return role


def list_users_by_role(role_type):
    role_type = require_choice(role_type, RoleType, "roleType")
    return User.query.join(Role).filter(Role.role_type == role_type.value).all()
