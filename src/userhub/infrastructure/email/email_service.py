import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from userhub.application.ports import ActivationNotifier
from userhub_config.settings import Settings

logger = logging.getLogger(__name__)

ACCOUNT_ACTIVATION_SUBJECT = "Account Activation - {app_name}"

ACCOUNT_ACTIVATION_TEXT = """Hello,

Thanks for registering with {app_name}.

Activate your account with this link:
{activation_link}

Or use this token: {token}

If you didn't register, you can safely ignore this email.

-- {app_name}
"""

ACCOUNT_ACTIVATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Account Activation</h2>
        <p style="color: #374151; line-height: 1.6;">Thanks for registering with {app_name}.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{activation_link}" style="display: inline-block; padding: 14px 28px; background-color: #2563eb; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Activate Account</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Token: <b>{token}</b></p>
        <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb;">
            <p style="color: #9ca3af; font-size: 13px; margin: 0;">If you didn't register, you can safely ignore this email.</p>
        </div>
    </div>
</body>
</html>
"""


class EmailDeliveryError(Exception):
    """Raised when SMTP is enabled but the message cannot be handed over."""


class EmailService(ActivationNotifier):
    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, email not sent to %s", to_email)
            return

        if not self._settings.smtp_host:
            msg = "SMTP host not configured"
            logger.error(msg)
            raise EmailDeliveryError(msg)

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise

    def activation_link(self, token: str) -> str:
        return f"{self._settings.frontend_base_url.rstrip('/')}/activate/{token}"

    def build_account_activation_message(
        self,
        to_email: str,
        token: str,
    ) -> MIMEMultipart:
        app_name = self._settings.app_name
        link = self.activation_link(token)
        return self._create_message(
            to_email=to_email,
            subject=ACCOUNT_ACTIVATION_SUBJECT.format(app_name=app_name),
            text_body=ACCOUNT_ACTIVATION_TEXT.format(
                app_name=app_name,
                activation_link=link,
                token=token,
            ),
            html_body=ACCOUNT_ACTIVATION_HTML.format(
                app_name=app_name,
                activation_link=link,
                token=token,
            ),
        )

    def send_account_activation_email_sync(self, to_email: str, token: str) -> None:
        message = self.build_account_activation_message(to_email, token)
        self._send_email(to_email, message)

    async def send_account_activation_email(self, to_email: str, token: str) -> None:
        await asyncio.to_thread(
            self.send_account_activation_email_sync,
            to_email,
            token,
        )
