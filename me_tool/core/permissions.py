from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from me_tool.api.deps import get_session_codec, load_user, require_user_id
from me_tool.core.exceptions import AuthorizationDenied
from me_tool.core.security import SessionCodec
from me_tool.database import get_db
from me_tool.models.enums import Role
from me_tool.schemas.staff import SafeStaff


def is_admin(user: Optional[SafeStaff]) -> bool:
    return user is not None and user.role == Role.ADMIN


class RequestGuard:
    """Dependency guarding a route.

    Every guarded route requires a session; a guard built with a role also
    rejects users without it, before the request body is read.
    """

    def __init__(self, required_role: Optional[Role] = None):
        self.required_role = required_role

    def __call__(
        self,
        request: Request,
        db: Session = Depends(get_db),
        codec: SessionCodec = Depends(get_session_codec),
    ) -> SafeStaff:
        user_id = require_user_id(request, codec)
        user = load_user(db, user_id)
        if self.required_role is not None and user.role != self.required_role:
            raise AuthorizationDenied()
        return user


require_user = RequestGuard()
require_admin = RequestGuard(Role.ADMIN)
