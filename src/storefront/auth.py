"""Register, login, logout and preference flows."""

from storefront.api import MarketplaceClient
from storefront.errors import FormValidationError, StorefrontError
from storefront.forms import LoginForm, RegistrationForm, validate_form
from storefront.notices import NoticeBoard
from storefront.session import Session, SessionStore
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

LANDING_ROUTES = {
    "Admin": "/admin/dashboard",
    "seller": "/seller/dashboard",
}


def landing_route(role: str | None) -> str:
    return LANDING_ROUTES.get(role, "/")


class AuthFlow:
    def __init__(self, client: MarketplaceClient, session: Session, store: SessionStore, notices: NoticeBoard):
        self.client = client
        self.session = session
        self.store = store
        self.notices = notices

    async def register(self, data: dict) -> str | None:
        """Returns the new user id, or None when the form or the server rejected it."""
        try:
            form = validate_form(RegistrationForm, data)
        except FormValidationError as exc:
            self.notices.error(str(exc))
            return None

        try:
            response = await self.client.register(form.to_payload())
        except StorefrontError as exc:
            self.notices.error(str(exc))
            return None

        self.notices.success(response.get("message") or "Registered successfully")
        logger.info("user_registered", user_id=response.get("userId"), role=form.role)
        return response.get("userId")

    async def login(self, data: dict) -> str | None:
        """Returns the landing route for the signed-in user, or None on failure."""
        try:
            form = validate_form(LoginForm, data)
        except FormValidationError as exc:
            self.notices.error(str(exc))
            return None

        try:
            response = await self.client.login(form.email, form.password)
        except StorefrontError as exc:
            self.notices.error(str(exc))
            return None

        self.session.apply_login(response)
        self.store.save(self.session)
        self.notices.success(response.get("message") or "Logged in")
        logger.info("user_logged_in", user_id=self.session.user_id, role=self.session.role)
        return landing_route(self.session.role)

    def logout(self) -> None:
        user_id = self.session.user_id
        self.session.reset()
        self.store.clear()
        logger.info("user_logged_out", user_id=user_id)

    async def save_preferences(self, preferences: list[str]) -> bool:
        selected = [p for p in dict.fromkeys(preferences) if p]
        if not selected:
            self.notices.error("Select at least one preference")
            return False
        if not self.session.user_id:
            self.notices.error("Please log in first")
            return False

        try:
            response = await self.client.add_preferences(self.session.user_id, selected)
        except StorefrontError as exc:
            self.notices.error(str(exc))
            return False

        self.session.user_preferences = list(response.get("userPreferences") or selected)
        self.store.save(self.session)
        self.notices.success(response.get("message") or "Preferences saved")
        return True
