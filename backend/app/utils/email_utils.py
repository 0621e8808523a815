# app/utils/email_utils.py
import logging
import smtplib
from email.message import EmailMessage

from sustainhub.core.config import settings

logger = logging.getLogger("sustainhub.mail")

STATUS_LABELS = {
    "pending": ("Pendente", "Pending"),
    "processing": ("Em processamento", "Processing"),
    "shipped": ("Enviado", "Shipped"),
    "delivered": ("Entregue", "Delivered"),
    "cancelled": ("Cancelado", "Cancelled"),
}


def mail_configured() -> bool:
    return bool(settings.SMTP_SERVER and settings.SMTP_USER)


def send_email(to_email: str, subject: str, body: str):
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = settings.SMTP_USER
    msg["To"] = to_email
    msg.set_content(body)

    try:
        with smtplib.SMTP_SSL(settings.SMTP_SERVER, settings.SMTP_PORT) as smtp:
            smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
            smtp.send_message(msg)
            logger.info("Email sent to %s", to_email)
    except Exception as e:
        logger.error("Failed to send email to %s: %s", to_email, e)
        raise


def order_status_email(order_id: int, status: str, language: str = "pt"):
    pt, en = STATUS_LABELS.get(status, (status, status))
    if language == "en":
        return (
            f"Order #{order_id}: {en}",
            f"Hello,\n\nYour order #{order_id} is now: {en}.\n\n-- SustainHub",
        )
    return (
        f"Pedido #{order_id}: {pt}",
        f"Olá,\n\nO seu pedido #{order_id} está agora: {pt}.\n\n-- SustainHub",
    )
