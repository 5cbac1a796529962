"""Notification Service — outbound email via fastapi-mail and SMS via an HTTP gateway.

Invariants:
    - Transport failures surface as NotificationError (never raw SMTP/HTTP exceptions)
    - send_email with a missing or malformed recipient raises NotificationError without
      contacting the server
    - One send_* call delivers at most one message; no retries here

Design Decisions:
    - FastMail built once from Settings: SUPPRESS_SEND keeps dev/test runs off the network
      and lets tests capture messages with record_messages()
    - httpx.AsyncClient injected for the SMS gateway so tests can swap in MockTransport
"""

import logging

import httpx
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors
from pydantic import ValidationError

from siakad.config import Settings
from siakad.core.errors import NotificationError

logger = logging.getLogger(__name__)


def build_mail_config(settings: Settings) -> ConnectionConfig:
    return ConnectionConfig(
        MAIL_USERNAME=settings.mail_username,
        MAIL_PASSWORD=settings.mail_password,
        MAIL_FROM=settings.mail_from,
        MAIL_FROM_NAME=settings.mail_from_name,
        MAIL_PORT=settings.mail_port,
        MAIL_SERVER=settings.mail_server,
        MAIL_STARTTLS=settings.mail_starttls,
        MAIL_SSL_TLS=settings.mail_ssl_tls,
        USE_CREDENTIALS=bool(settings.mail_username),
        SUPPRESS_SEND=int(settings.mail_suppress_send),
    )


class MailNotificationService:
    """NotificationService backed by SMTP (fastapi-mail) and an SMS HTTP gateway."""

    def __init__(
        self, settings: Settings, http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings
        self.mail = FastMail(build_mail_config(settings))
        self.http_client = http_client or httpx.AsyncClient(
            timeout=settings.sms_timeout_seconds,
        )

    async def send_email(self, to: str | None, subject: str, body: str) -> None:
        if not to:
            raise NotificationError("recipient address missing", "email")
        try:
            message = MessageSchema(
                subject=subject,
                recipients=[to],
                body=body,
                subtype=MessageType.plain,
            )
        except ValidationError as e:
            logger.error(
                f"Rejected recipient address: {e.error_count()} error(s)",
                extra={"channel": "email"},
            )
            raise NotificationError("invalid recipient", "email") from e
        try:
            await self.mail.send_message(message)
        except ConnectionErrors as e:
            logger.error(f"SMTP delivery failed: {e}", extra={"channel": "email"})
            raise NotificationError(str(e), "email") from e
        logger.info("Email sent", extra={"channel": "email"})

    async def send_sms(self, phone: str, message: str) -> None:
        headers = {}
        if self.settings.sms_api_key:
            headers["Authorization"] = f"Bearer {self.settings.sms_api_key}"
        try:
            response = await self.http_client.post(
                self.settings.sms_gateway_url,
                json={"to": phone, "message": message},
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"SMS gateway call failed: {e}", extra={"channel": "sms"})
            raise NotificationError(str(e), "sms") from e
        logger.info("SMS sent", extra={"channel": "sms"})

    async def aclose(self) -> None:
        await self.http_client.aclose()
