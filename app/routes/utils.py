from flask import request

from app.errors import InvalidArgument


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data
