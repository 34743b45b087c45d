"""FastAPI endpoints for the Identity domain: registration and login."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from identity.api.schemas import AuthResponse, CredentialsRequest, UserSummary
from identity.user.authentication import authenticate
from identity.user.registration import RegisterUser
from identity.user.tokens import issue_token
from shared.api import operation_boundary

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=201, response_model=AuthResponse)
async def register_user(body: CredentialsRequest) -> AuthResponse:
    command = RegisterUser(email=body.email, password=body.password)
    with operation_boundary("Registration failed"):
        user_id = current_domain.process(command, asynchronous=False)
    return AuthResponse(
        message="User registered successfully",
        token=issue_token(user_id, body.email),
        user=UserSummary(email=body.email),
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: CredentialsRequest) -> AuthResponse:
    with operation_boundary("Login failed"):
        user = authenticate(body.email, body.password)
    return AuthResponse(
        message="Login successful",
        token=issue_token(user.id, user.email),
        user=UserSummary(email=user.email),
    )
