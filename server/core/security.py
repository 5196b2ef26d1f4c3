# server/core/security.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from core.errors import UnauthorizedError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """Identity decoded from a verified bearer token."""
    user_id: str
    username: str


# -------------------------------
# Password Hashing
# -------------------------------

class PasswordHasher:
    def __init__(self, rounds: int | None = None):
        options = {"bcrypt__rounds": rounds} if rounds else {}
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", **options)

    def hash(self, plain_password: str) -> str:
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            # unknown or corrupted hash format
            logger.warning("Stored password hash could not be identified")
            return False


# -------------------------------
# Token Issuing
# -------------------------------

class TokenIssuer:
    """
    Issues and verifies signed, stateless session tokens.
    Tokens carry the username in 'sub' and the user id in 'uid'.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise ValueError("JWT secret key is not configured")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, username: str, user_id: str, expires_delta: timedelta | None = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        claims = {"sub": username, "uid": user_id, "iat": now, "exp": expire}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> CurrentUser:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise UnauthorizedError("Could not validate credentials") from e

        username = payload.get("sub")
        user_id = payload.get("uid")
        if not username or not user_id:
            raise UnauthorizedError("Could not validate credentials")
        return CurrentUser(user_id=user_id, username=username)
