from app.routes.attendance import register_attendance_routes
from app.routes.auth import register_auth_routes
from app.routes.meetings import register_meeting_routes
from app.routes.requests import register_request_routes
from app.routes.users import register_user_routes
from app.routes.voting import register_voting_routes


def register_routes(app):
    register_auth_routes(app)
    register_attendance_routes(app)
    register_request_routes(app)
    register_meeting_routes(app)
    register_user_routes(app)
    register_voting_routes(app)
