import os
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import requests
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from app.platform.config import settings
from app.platform.logger import get_logger

# Initialize Logger
logger = get_logger("email_service")

current_dir = os.path.dirname(os.path.abspath(__file__))
template_dir = os.path.join(current_dir, "../../templates")

if not os.path.exists(template_dir):
    template_dir = os.path.join(os.getcwd(), "app/templates")

env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(["html"]),
)


def nl2br(value: str) -> Markup:
    """Escape user text and keep its line breaks."""
    return Markup("<br>").join(escape(value).split("\n"))


env.filters["nl2br"] = nl2br


class EmailDeliveryError(Exception):
    """Raised by a transport when a message could not be handed off."""


def send_email(to_email: str, subject: str, body: str, from_address: str | None = None) -> bool:
    """
    Send an HTML email and report whether it was handed off.

    Uses the HTTP relay service when configured, falling back to direct SMTP
    if the relay fails. Never raises: every failure is logged and returned as
    ``False`` so callers can map it to their own response.
    """
    sender = from_address or settings.MAIL_FROM_ADDRESS

    if settings.EMAIL_RELAY_URL and settings.EMAIL_RELAY_API_KEY:
        try:
            send_email_via_relay(to_email, subject, body, sender)
            return True
        except Exception as e:
            logger.error(f"Email relay failed: {str(e)}")
            logger.info("Attempting direct SMTP as fallback...")

    try:
        send_email_direct_smtp(to_email, subject, body, sender)
        return True
    except Exception as e:
        logger.error(f"Error sending email to {to_email}: {str(e)}")
        return False


def send_email_via_relay(to_email: str, subject: str, body: str, from_address: str):
    """Send email via HTTP relay service"""
    payload = {
        "to_email": to_email,
        "subject": subject,
        "body": body,
        "from_address": from_address,
    }

    headers = {
        "X-API-Key": settings.EMAIL_RELAY_API_KEY,
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            settings.EMAIL_RELAY_URL,
            json=payload,
            headers=headers,
            timeout=settings.EMAIL_RELAY_TIMEOUT,
        )
        response.raise_for_status()

    except requests.exceptions.Timeout:
        logger.error(f"Email relay timeout for {to_email}")
        raise EmailDeliveryError("Email relay service timeout")

    except requests.exceptions.RequestException as e:
        if e.response is not None:
            logger.error(f"Response status: {e.response.status_code}")
            logger.error(f"Response body: {e.response.text}")
        raise EmailDeliveryError(f"Email relay service error: {str(e)}")

    logger.info(f"Email sent via relay to {to_email}")


def send_email_direct_smtp(to_email: str, subject: str, body: str, from_address: str):
    """Send email via SMTP, bounded by MAIL_TIMEOUT"""
    if not settings.MAIL_USERNAME or not settings.MAIL_PASSWORD:
        raise EmailDeliveryError("SMTP credentials are not configured")

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = from_address
    msg["To"] = to_email

    msg.attach(MIMEText(body, "html"))

    port = settings.MAIL_PORT
    timeout = settings.MAIL_TIMEOUT

    if port == 465:
        context = ssl.create_default_context()
        with smtplib.SMTP_SSL(settings.MAIL_HOST, port, context=context, timeout=timeout) as server:
            server.login(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
            server.sendmail(from_address, to_email, msg.as_string())
    else:
        with smtplib.SMTP(settings.MAIL_HOST, port, timeout=timeout) as server:
            server.ehlo()

            if str(settings.MAIL_ENCRYPTION).upper() in ["TLS", "TRUE"]:
                server.starttls()
                server.ehlo()

            server.login(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
            server.sendmail(from_address, to_email, msg.as_string())

    logger.info(f"Email sent via SMTP to {to_email}")
