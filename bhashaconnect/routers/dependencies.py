# dependencies.py
import logging
from typing import Callable

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from bhashaconnect.config import settings
from bhashaconnect.database import get_db
from bhashaconnect.errors import PermissionDenied, Unauthenticated
from bhashaconnect.models.enums import Role
from bhashaconnect.models.user import User
from bhashaconnect.schemas.user import TokenData
from bhashaconnect.services.pagination import PageParams
from bhashaconnect.services.permissions import Caller, check_permission
from bhashaconnect.utils.jwt_handler import decode_access_token


logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def get_current_user(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User:
    if not token:
        raise Unauthenticated("Access token required")
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise Unauthenticated("Invalid token payload")
    try:
        token_data = TokenData(user_id=int(user_id))
    except ValueError as exc:
        raise Unauthenticated("Invalid token subject") from exc
    user = db.query(User).filter(User.id == token_data.user_id).first()
    if not user:
        raise Unauthenticated("User not found")
    return user


def get_current_caller(current_user: User = Depends(get_current_user)) -> Caller:
    return Caller(id=current_user.id, role=Role(current_user.role))


def require_roles(*roles: Role) -> Callable[[Caller], Caller]:
    allowed = frozenset(roles)

    def _require(caller: Caller = Depends(get_current_caller)) -> Caller:
        decision = check_permission(caller, required_roles=allowed)
        if not decision:
            logger.info("role gate denied user=%s role=%s allowed=%s", caller.id, caller.role.value, sorted(allowed))
            raise PermissionDenied("Insufficient permissions")
        return caller

    return _require


def get_page_params(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
) -> PageParams:
    return PageParams(page=page, limit=limit)
