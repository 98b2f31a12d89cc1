from pydantic import BaseModel, ConfigDict

from handyhub.common.enums import GuardOutcome, Role


class RouteGuardRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_role: Role | None = None
    required_role: Role | None = None
    is_auth_loading: bool = False
    # Path the user asked for; echoed back on login redirects only.
    return_url: str | None = None
    # Routes with no role requirement can still demand a signed-in principal.
    require_auth: bool = False
    # Set when the identity provider failed to resolve the role (not "no principal").
    role_error: str | None = None


class RouteGuardDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: GuardOutcome
    destination: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.outcome == GuardOutcome.REDIRECT
