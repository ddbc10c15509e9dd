from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from starlette.requests import Request
from starlette.responses import Response

from me_tool.core.config import Settings

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Checks a plain password against its stored hash."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class SessionCodec:
    """Signs, verifies and writes the session cookie.

    The cookie carries a signed token with the user id and the time the
    session was created. Verification is stateless: nothing about a session
    is kept on the server.
    """

    def __init__(
        self,
        secret: str,
        *,
        cookie_name: str = "ME_session",
        max_age_days: int = 30,
        algorithm: str = "HS256",
        secure: bool = False,
        domain: Optional[str] = None,
        same_site: str = "lax",
    ) -> None:
        self.secret = secret
        self.cookie_name = cookie_name
        self.max_age = timedelta(days=max_age_days)
        self.algorithm = algorithm
        self.secure = secure
        self.domain = domain
        self.same_site = same_site

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionCodec":
        secret = settings.resolve_session_secret()
        production = settings.is_production
        return cls(
            secret,
            cookie_name=settings.SESSION_COOKIE_NAME,
            max_age_days=settings.SESSION_MAX_AGE_DAYS,
            algorithm=settings.SESSION_ALGORITHM,
            secure=production,
            domain=settings.DOMAIN if production else None,
            same_site="strict" if production else "lax",
        )

    @property
    def max_age_seconds(self) -> int:
        return int(self.max_age.total_seconds())

    def encode(self, user_id: str, created: Optional[datetime] = None) -> str:
        created = created or datetime.now(timezone.utc)
        payload = {
            "userId": str(user_id),
            "created": created.isoformat(),
            "exp": created + self.max_age,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Returns the session payload, or None for anything that does not verify."""
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except (JWTError, ValueError):
            return None
        user_id = payload.get("userId")
        if not isinstance(user_id, str) or not user_id:
            return None
        return payload

    def read_user_id(self, request: Request) -> Optional[str]:
        payload = self.decode(request.cookies.get(self.cookie_name))
        if payload is None:
            return None
        return payload["userId"]

    def commit(self, response: Response, user_id: str) -> None:
        response.set_cookie(
            self.cookie_name,
            self.encode(user_id),
            max_age=self.max_age_seconds,
            path="/",
            domain=self.domain,
            secure=self.secure,
            httponly=True,
            samesite=self.same_site,
        )

    def destroy(self, response: Response) -> None:
        response.delete_cookie(
            self.cookie_name,
            path="/",
            domain=self.domain,
            secure=self.secure,
            httponly=True,
            samesite=self.same_site,
        )
