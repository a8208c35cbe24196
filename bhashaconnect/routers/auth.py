# auth.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bhashaconnect.database import get_db
from bhashaconnect.errors import PayloadInvalid, Unauthenticated
from bhashaconnect.models.user import User
from bhashaconnect.schemas.common import Envelope
from bhashaconnect.schemas.user import Token, UserCreate, UserItem, UserLogin, UserRead
from bhashaconnect.utils.jwt_handler import create_access_token
from bhashaconnect.utils.password_hash import hash_password, verify_password


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=Envelope[UserItem], status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> Envelope[UserItem]:
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise PayloadInvalid(['"email" is already registered'], message="Email already registered")
    user = User(
        name=user_in.name,
        email=user_in.email,
        password=hash_password(user_in.password),
        role=user_in.role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.register id=%s role=%s", user.id, user.role.value)
    return Envelope(message="User registered successfully", data=UserItem(user=UserRead.model_validate(user)))


@router.post("/login", response_model=Envelope[Token])
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Envelope[Token]:
    user = db.query(User).filter(User.email == user_in.email).first()
    if not user or not verify_password(user_in.password, user.password):
        raise Unauthenticated("Invalid credentials")
    token = create_access_token({"sub": str(user.id), "role": user.role.value})
    return Envelope(
        message="Login successful",
        data=Token(access_token=token, token_type="bearer", user=UserRead.model_validate(user)),
    )
