"""Authentication service for account creation and password handling."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from grocery_api.exceptions import AuthError, StoreError, ValidationError
from grocery_api.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown emails and wrong passwords raise the same AuthError.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = get_user_by_email(db, email)
    if not user:
        logger.info("Invalid credentials: no such user")
        raise AuthError("Invalid email or password")
    if not verify_password(password, user.password_hash):
        logger.info("Invalid credentials: wrong password")
        raise AuthError("Invalid email or password")

    logger.info(f"Login success for user {user.id}")
    return user


def create_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a new user, rejecting an email that is already registered."""
    if not name or not email or not password:
        raise ValidationError("Name, email, and password are required")

    if get_user_by_email(db, email):
        raise ValidationError("Email is already registered")

    user = User(name=name, email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ValidationError("Email is already registered") from None
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Database error during registration", e) from e
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user
