from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from database import get_db
from models.user import User
from services.security import decode_access_token

bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: Session = Depends(get_db),
) -> User:
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    sub = decode_access_token(credentials.credentials)
    if not sub or not sub.isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = db.query(User).filter(User.id == int(sub)).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def get_current_pharmacy_id(current_user: User = Depends(get_current_user)) -> str:
    """Pharmacy the caller manages. Dashboard routes are scoped to it."""
    if current_user.role != "pharmacy":
        raise HTTPException(status_code=403, detail="Pharmacy access required")
    if not current_user.pharmacy_id:
        raise HTTPException(
            status_code=404,
            detail="Your account is not linked to a pharmacy. Please contact support.",
        )
    return current_user.pharmacy_id
