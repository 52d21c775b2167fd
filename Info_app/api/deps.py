from starlette.requests import HTTPConnection

from Info_app.service import InfoService


def get_service(conn: HTTPConnection) -> InfoService:
    """The app-wide InfoService built by create_app (works for HTTP and WebSocket)."""
    return conn.app.state.service
