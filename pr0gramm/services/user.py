"""``/user/*`` endpoints.

``login`` and ``send_password_reset_mail`` are the only POSTs that work
without a session, so their endpoint specs skip the nonce.
"""

from __future__ import annotations

from ..models import SiteSettings
from ..runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport
from .base import JSON, BaseService

LOGIN_SPEC = RestEndpointSpec(
    id="user_login",
    method="POST",
    build_path=lambda params: "/user/login",
    build_body=lambda params: {"name": params["name"], "password": params["password"]},
    ignore_nonce=True,
)

PASSWORD_RESET_MAIL_SPEC = RestEndpointSpec(
    id="user_password_reset_mail",
    method="POST",
    build_path=lambda params: "/user/sendpasswordresetmail",
    build_body=lambda params: {"email": params["email"]},
    ignore_nonce=True,
)


class UserService(BaseService):
    def __init__(self, transport: RESTTransport) -> None:
        super().__init__(transport)
        self._runner = RestRunner(transport)

    async def ban(self, user: str, reason: str, days: int) -> JSON:
        return await self._transport.post("/user/ban", {"user": user, "reason": reason, "days": days})

    async def change_email(self, token: str) -> JSON:
        return await self._transport.post("/user/changeemail", {"token": token})

    async def change_password(self, new_password: str) -> JSON:
        return await self._transport.post("/user/changepassword", {"password": new_password})

    async def get_follow_list(self, flags: int) -> JSON:
        return await self._transport.get("/user/followlist", {"flags": int(flags)})

    async def get_info(self) -> JSON:
        return await self._transport.get("/user/info")

    async def invite(self, email: str) -> JSON:
        return await self._transport.post("/user/invite", {"email": email})

    async def join_with_invite(self, token: str, email: str, password: str, name: str) -> JSON:
        return await self._transport.post(
            "/user/joinwithinvite",
            {"token": token, "email": email, "password": password, "name": name},
        )

    async def join_with_token(self, token: str, email: str, password: str, name: str) -> JSON:
        return await self._transport.post(
            "/user/joinwithtoken",
            {"token": token, "email": email, "password": password, "name": name},
        )

    async def load_invite(self, token: str) -> JSON:
        return await self._transport.get("/user/loadinvite", {"token": token})

    async def load_payment_token(self, token: str) -> JSON:
        return await self._transport.post("/user/loadpaymenttoken", {"token": token})

    async def login(self, name: str, password: str) -> JSON:
        return await self._runner.run(
            spec=LOGIN_SPEC, adapter=ResponseAdapter(), params={"name": name, "password": password}
        )

    async def logout(self, session_id: str) -> JSON:
        return await self._transport.post("/user/logout", {"id": session_id})

    async def redeem_token(self, token: str) -> JSON:
        return await self._transport.post("/user/redeemtoken", {"token": token})

    async def request_email_change(self, new_email: str) -> JSON:
        return await self._transport.post("/user/requestemailchange", {"email": new_email})

    async def reset_password(self, name: str, password: str, token: str) -> JSON:
        return await self._transport.post(
            "/user/resetpassword", {"name": name, "password": password, "token": token}
        )

    async def send_password_reset_mail(self, email: str) -> JSON:
        return await self._runner.run(
            spec=PASSWORD_RESET_MAIL_SPEC, adapter=ResponseAdapter(), params={"email": email}
        )

    async def set_site_settings(self, settings: SiteSettings) -> JSON:
        return await self._transport.post("/user/sitesettings", settings.to_form())

    async def sync(self, offset: int) -> JSON:
        return await self._transport.get("/user/sync", {"offset": offset})

    async def validate(self, token: str) -> JSON:
        return await self._transport.post("/user/validate", {"token": token})
