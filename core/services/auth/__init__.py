from core.services.auth.service import AuthService
from core.services.auth.session import UserSessionContext, UserSessionPrincipal

__all__ = ["AuthService", "UserSessionPrincipal", "UserSessionContext"]
