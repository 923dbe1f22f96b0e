from __future__ import annotations

import time
from typing import Optional

from flask import current_app, render_template
from flask_mail import Message

from campus_tour.errors import NotificationError
from campus_tour.extensions import mail
from campus_tour.observability import log_event

SENDER_NAME = "Campus Tour"


class FeedbackNotifier:
    """
    Emails the administrator about each feedback submission via Flask-Mail.

    Configuration is read from the current app on every call so that the
    credentials in effect at request time decide whether a mail goes out.
    Without EMAIL_USER/EMAIL_PASS the notifier is disabled and sends nothing.
    """

    template = "feedback_notification"

    @property
    def enabled(self) -> bool:
        cfg = current_app.config
        return bool(cfg.get("MAIL_USERNAME") and cfg.get("MAIL_PASSWORD") and cfg.get("ADMIN_EMAIL"))

    def build_message(self, *, name, email, message, image_url: Optional[str] = None) -> Message:
        cfg = current_app.config
        context = {
            "name": name,
            "email": email,
            "message": message,
            "image_url": image_url,
        }
        msg = Message(
            subject=cfg.get("FEEDBACK_EMAIL_SUBJECT", "New Feedback Received"),
            sender=(SENDER_NAME, cfg["MAIL_USERNAME"]),
            recipients=[cfg["ADMIN_EMAIL"]],
        )
        msg.body = render_template(f"email/{self.template}.txt", **context)
        msg.html = render_template(f"email/{self.template}.html", **context)
        return msg

    def notify(self, *, name, email, message, image_url: Optional[str] = None) -> bool:
        """
        Send the notification. Returns False when skipped for missing credentials.
        Raises NotificationError when the mail server rejects the message; no retries.
        """
        logger = current_app.logger
        if not self.enabled:
            log_event(logger, "feedback_notify_skipped", reason="mail_credentials_missing")
            return False

        msg = self.build_message(name=name, email=email, message=message, image_url=image_url)
        start = time.perf_counter()
        try:
            mail.send(msg)
        except Exception as ex:
            latency_ms = int((time.perf_counter() - start) * 1000)
            log_event(
                logger, "feedback_notified", level="warning",
                outcome="smtp_error", to=msg.recipients[0], latency_ms=latency_ms, smtp_error=str(ex),
            )
            raise NotificationError(f"feedback notification failed: {ex}") from ex

        latency_ms = int((time.perf_counter() - start) * 1000)
        log_event(logger, "feedback_notified", outcome="sent", to=msg.recipients[0], latency_ms=latency_ms)
        return True
