import logging
import secrets
import smtplib
import string
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from jinja2 import Environment, FileSystemLoader, select_autoescape
import os
from steamvision.core.config import settings

logger = logging.getLogger(__name__)

template_dir = os.path.join(os.path.dirname(__file__), 'email_templates')
env = Environment(loader=FileSystemLoader(template_dir), autoescape=select_autoescape(["html"]))


def generate_verification_code(length=6):
    return ''.join(secrets.choice(string.digits) for _ in range(length))


def send_email(to_email: str, subject: str, template_name: str, context: dict):
    if not settings.smtp_enabled:
        logger.warning("SMTP not configured, dropping %r to %s", subject, to_email)
        return False
    try:
        template = env.get_template(template_name)
        html_content = template.render(context)

        msg = MIMEMultipart()
        msg['From'] = settings.MAIL_FROM
        msg['To'] = to_email
        msg['Subject'] = subject

        msg.attach(MIMEText(html_content, 'html'))

        with smtplib.SMTP(settings.SMTP_SERVER, settings.SMTP_PORT, timeout=15) as server:
            server.starttls()
            server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
            server.sendmail(settings.MAIL_FROM, to_email, msg.as_string())
    except Exception:
        logger.exception("Failed to send %r to %s", subject, to_email)
        return False
    logger.info("Email %r sent to %s", subject, to_email)
    return True


def send_verification_code_email(to_email: str, code: str):
    return send_email(
        to_email=to_email,
        subject="Password reset verification code",
        template_name="verification.html",
        context={"code": code}
    )
