"""Route guard decisions for role-restricted views.

``decide_route_access`` is a pure function of its input: front-ends call it
(directly or through ``POST /api/v1/access/decision``) before rendering a
protected view. ``RouteGuard`` wraps it for callers that perform the actual
navigation and must only navigate once per attempt.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

from handyhub.common.enums import GuardOutcome, Role
from handyhub.common.logging import get_logger
from handyhub.config import settings
from handyhub.core.access.schemas import RouteGuardDecision, RouteGuardRequest

logger = get_logger("access.guard")

# Same reserved set as a browser's encodeURIComponent.
URI_COMPONENT_SAFE = "!*'()"

ALLOW = RouteGuardDecision(outcome=GuardOutcome.ALLOW)
LOADING = RouteGuardDecision(outcome=GuardOutcome.LOADING)
BLOCKED = RouteGuardDecision(outcome=GuardOutcome.BLOCKED)


def has_role_access(current_role: Role | None, required_role: Role) -> bool:
    return current_role is not None and current_role == required_role


def get_redirect_destination(
    current_role: Role | None,
    required_role: Role | None,
    default_redirect: str | None = None,
    *,
    pro_app_path: str | None = None,
    client_home_path: str | None = None,
) -> str:
    default_redirect = default_redirect or settings.LOGIN_PATH
    if required_role is None or current_role is None:
        return default_redirect

    # Pros live in the mobile app; send them there instead of to a client page.
    if required_role == Role.CLIENT and current_role == Role.PRO:
        return pro_app_path or settings.PRO_APP_PATH

    if required_role == Role.PRO and current_role == Role.CLIENT:
        return client_home_path or settings.CLIENT_HOME_PATH

    return default_redirect


def build_redirect_url(
    destination: str,
    return_url: str | None = None,
    default_redirect: str | None = None,
) -> str:
    default_redirect = default_redirect or settings.LOGIN_PATH
    # Role-mismatch redirects never carry a return path.
    if return_url and destination == default_redirect:
        encoded = quote(return_url, safe=URI_COMPONENT_SAFE)
        return f"{destination}?{settings.RETURN_URL_PARAM}={encoded}"
    return destination


def decide_route_access(
    request: RouteGuardRequest,
    *,
    login_path: str | None = None,
    pro_app_path: str | None = None,
    client_home_path: str | None = None,
) -> RouteGuardDecision:
    if request.is_auth_loading:
        return LOADING

    if request.role_error:
        return BLOCKED

    login_path = login_path or settings.LOGIN_PATH

    if request.required_role is None:
        if request.require_auth and request.current_role is None:
            return RouteGuardDecision(
                outcome=GuardOutcome.REDIRECT,
                destination=build_redirect_url(login_path, request.return_url, login_path),
            )
        return ALLOW

    if has_role_access(request.current_role, request.required_role):
        return ALLOW

    destination = get_redirect_destination(
        request.current_role,
        request.required_role,
        login_path,
        pro_app_path=pro_app_path,
        client_home_path=client_home_path,
    )
    # Only anonymous users come back; a signed-in user with the wrong role would loop.
    if request.current_role is None:
        destination = build_redirect_url(destination, request.return_url, login_path)
    return RouteGuardDecision(outcome=GuardOutcome.REDIRECT, destination=destination)


class RouteGuard:
    """Evaluates navigation attempts and redirects at most once per attempt."""

    def __init__(self, navigate: Callable[[str], None], **destinations: str | None):
        self._navigate = navigate
        self._destinations = destinations
        self._has_redirected = False
        self.last_decision: RouteGuardDecision | None = None

    @property
    def has_redirected(self) -> bool:
        return self._has_redirected

    def evaluate(self, request: RouteGuardRequest) -> RouteGuardDecision:
        decision = decide_route_access(request, **self._destinations)
        self.last_decision = decision

        if decision.outcome == GuardOutcome.BLOCKED:
            logger.warning("Role resolution failed, not redirecting: %s", request.role_error)
        elif decision.is_redirect and not self._has_redirected:
            self._has_redirected = True
            logger.info(
                "Redirecting role=%s required=%s to %s",
                request.current_role.value if request.current_role else None,
                request.required_role.value if request.required_role else None,
                decision.destination,
            )
            self._navigate(decision.destination)

        return decision

    def reset(self) -> None:
        self._has_redirected = False
        self.last_decision = None
