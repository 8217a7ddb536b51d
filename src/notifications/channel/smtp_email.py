"""SMTP email adapter — sends mail through an authenticated SMTP relay."""

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

from notifications.channel.email_port import EmailPort, NotificationError


class SMTPEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int,
        username: str | None = None,
        password: str | None = None,
        use_ssl: bool = True,
        sender_name: str = "Storefront",
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.sender_name = sender_name
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        message = EmailMessage()
        message["From"] = f"{self.sender_name} <{self.username}>"
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")

        try:
            with self._connect() as client:
                if self.username and self.password:
                    client.login(self.username, self.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"SMTP delivery to {to} failed: {exc}") from exc

        return {"message_id": message["Message-ID"], "status": "sent"}
