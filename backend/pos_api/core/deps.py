from typing import Optional

from fastapi import Request

from ..database import get_session_local


def get_db():
    db = get_session_local()()
    try:
        yield db
    finally:
        db.close()


def require_authenticated(request: Request) -> Optional[str]:
    return request.app.state.authenticator.authenticate(request)
