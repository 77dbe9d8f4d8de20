"""
Authentication endpoints for API v1.

Users register and log in with a phone number and password and get
back a bearer token carrying their id and role.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from home_services_api.app.core.security import get_current_user, token_for_user
from home_services_api.app.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserBrief, UserRead
from home_services_api.app.services.user_service import UserService


router = APIRouter()


def _auth_response(user: UserRead) -> AuthResponse:
    return AuthResponse(
        token=token_for_user({"id": user.id, "role": user.role}),
        user=UserBrief(id=user.id, full_name=user.full_name, role=user.role),
    )


@router.post("/auth/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest) -> AuthResponse:
    """Register a new client, provider or (first account only) admin.

    ``full_name``, ``phone`` and ``password`` are required.  A phone
    number that is already taken yields 400 ``create_failed``.
    """
    if not data.full_name or not data.phone or not data.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing_fields")
    try:
        user = await UserService.create_user(data)
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _auth_response(user)


@router.post("/auth/login", response_model=AuthResponse)
async def login(data: LoginRequest) -> AuthResponse:
    """Exchange phone and password for a token."""
    user = None
    if data.phone and data.password:
        user = await UserService.authenticate(data.phone, data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_credentials")
    return _auth_response(user)


@router.get("/auth/me", response_model=UserRead)
async def me(current_user: Dict[str, Any] = Depends(get_current_user)) -> UserRead:
    return UserRead(**current_user)
