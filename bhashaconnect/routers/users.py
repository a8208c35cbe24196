# users.py
import logging

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from bhashaconnect.database import get_db
from bhashaconnect.errors import PermissionDenied, ResourceNotFound
from bhashaconnect.models.user import User
from bhashaconnect.routers.dependencies import get_current_caller, get_current_user
from bhashaconnect.schemas.common import Acknowledgement, Envelope
from bhashaconnect.schemas.user import UserItem, UserRead
from bhashaconnect.services.permissions import Caller, check_permission


router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/me", response_model=Envelope[UserItem])
def read_current_user(current_user: User = Depends(get_current_user)) -> Envelope[UserItem]:
    return Envelope(data=UserItem(user=UserRead.model_validate(current_user)))


@router.delete("/{user_id}", response_model=Acknowledgement)
def delete_user(
    user_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Acknowledgement:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise ResourceNotFound("User not found")
    # An account belongs to itself; admins may remove anyone.
    if not check_permission(caller, owner_id=user.id):
        raise PermissionDenied("You can only delete your own account")

    db.delete(user)
    db.commit()
    logger.info("users.delete id=%s by=%s", user_id, caller.id)
    return Acknowledgement(message="User deleted successfully")
