"""Email channel registry — the notifier used for order messages.

Uses the fake adapter by default. Set EMAIL_ADAPTER=smtp (with SMTP_HOST,
SMTP_PORT, SMTP_USER, SMTP_PASSWORD, SMTP_USE_SSL) to send real mail.
"""

import os

from notifications.channel.email_port import EmailPort

_email_channel: EmailPort | None = None


def _build_channel() -> EmailPort:
    adapter = os.environ.get("EMAIL_ADAPTER", "fake")
    if adapter == "fake":
        from notifications.channel.fake_email import FakeEmailAdapter

        return FakeEmailAdapter()
    elif adapter == "smtp":
        from notifications.channel.smtp_email import SMTPEmailAdapter

        return SMTPEmailAdapter(
            host=os.environ["SMTP_HOST"],
            port=int(os.environ.get("SMTP_PORT", "465")),
            username=os.environ.get("SMTP_USER"),
            password=os.environ.get("SMTP_PASSWORD"),
            use_ssl=os.environ.get("SMTP_USE_SSL", "true").lower() == "true",
            sender_name=os.environ.get("STORE_NAME", "Storefront"),
            timeout=float(os.environ.get("NOTIFIER_TIMEOUT_SECONDS", "10")),
        )
    else:
        raise ValueError(f"Unknown email adapter: {adapter}")


def get_email_channel() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _email_channel
    if _email_channel is None:
        _email_channel = _build_channel()
    return _email_channel


def set_email_channel(channel: EmailPort) -> None:
    """Override the active email adapter (useful for tests)."""
    global _email_channel
    _email_channel = channel


def reset_email_channel() -> None:
    """Reset to the configured default adapter."""
    global _email_channel
    _email_channel = None
