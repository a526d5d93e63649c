from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session

from config import ACCESS_TOKEN_EXPIRE_MINUTES
from app.database import get_db
from app.crud import user as crud_user
from app.utils.utils import verify_password, create_access_token
from app.schemas.user import UserLogin, LoginResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/login", response_model=LoginResponse)
def login(
    response: Response,
    login_data: UserLogin,
    db: Session = Depends(get_db)
):
    """
    JSON login. Returns a bearer token and also sets it as a cookie.
    """
    user = crud_user.get_user_by_email(db, email=login_data.email)
    if not user or not verify_password(login_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid email or password",
        )

    access_token = create_access_token(
        data={"sub": str(user.id)}
    )

    # Set cookie for browser-based access
    response.set_cookie(
        key="access_token",
        value=f"{access_token}",
        httponly=True,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        expires=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="lax",
        secure=False  # Set to True in production (HTTPS)
    )

    return {
        "message": "Login successful",
        "access_token": access_token,
        "token_type": "bearer",
        "user_id": user.id
    }

@router.post("/logout")
def logout(response: Response):
    """
    Logout the user by clearing the access_token cookie.
    """
    response.delete_cookie("access_token")
    return {"message": "Logged out successfully"}
