# server/api/auth.py

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm, OAuth2PasswordBearer
from sqlalchemy.orm import Session
from database import get_db
from core import config
from core.errors import UnauthorizedError
from core.repository import UserRepository
from core.schemas import AuthRequest, CurrentUserOut, Token, ok
from core.security import CurrentUser, PasswordHasher, TokenIssuer
from core.services import AuthService, UserService


router = APIRouter(prefix="/api/auth", tags=["auth"])

pwd_hasher = PasswordHasher(rounds=config.BCRYPT_ROUNDS)
token_issuer = TokenIssuer(
    config.SECRET_KEY,
    algorithm=config.ALGORITHM,
    expire_minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES,
)

# auto_error is off so a missing token goes through the same envelope as a bad one
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


# -------------------------------
# Dependencies
# -------------------------------

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    user_service = UserService(UserRepository(db), pwd_hasher)
    return AuthService(user_service, token_issuer)


def get_current_user(token: str | None = Depends(oauth2_scheme)) -> CurrentUser:
    if not token:
        raise UnauthorizedError("Not authenticated")
    return token_issuer.verify(token)


# -------------------------------
# Auth Endpoints
# -------------------------------

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(req: AuthRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.register(req.username, req.password)
    return ok(result, "User registered successfully", status_code=status.HTTP_201_CREATED)


@router.post("/login")
def login(req: AuthRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.login(req.username, req.password)
    return ok(result, "Login successful")


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    auth: AuthService = Depends(get_auth_service),
):
    """
    OAuth2 password flow used by the interactive API docs.
    Same checks as /login, answered in the plain OAuth2 token format.
    """
    result = auth.login(form_data.username, form_data.password)
    return {"access_token": result.token, "token_type": "bearer"}


@router.get("/me")
def read_users_me(current_user: CurrentUser = Depends(get_current_user)):
    return ok(CurrentUserOut(user_id=current_user.user_id, username=current_user.username))
