"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database, SMTP server or SMS gateway
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("MAIL_SUPPRESS_SEND", "true")
os.environ.setdefault("SMS_GATEWAY_URL", "http://sms-gateway.invalid/send")
