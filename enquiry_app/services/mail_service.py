# enquiry_app/services/mail_service.py
# Mail service - plain-text notifications via Flask-Mail
# - Single attempt, no retry: failures go straight back to the user, who resubmits
# - Reply-To and CC support
# - Callers only see sent / not sent; details go to the log

import logging
import smtplib
from typing import List, Optional

from flask import current_app
from flask_mail import Message

from enquiry_app.extensions import mail

logger = logging.getLogger(__name__)


class MailService:
    def send(
        self,
        to_addr: str,
        subject: str,
        body: str,
        reply_to: Optional[str] = None,
        cc: Optional[List[str]] = None,
    ) -> bool:
        """
        Send one plain-text message.

        Returns True when the transport accepted the message, False on any
        transport failure.
        """
        if not to_addr:
            logger.error("Mail not sent: no recipient")
            return False

        msg = Message(
            subject=subject,
            recipients=[to_addr],
            body=body,
            sender=current_app.config.get('MAIL_DEFAULT_SENDER'),
            reply_to=reply_to,
            cc=cc or None,
        )

        try:
            mail.send(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Mail transport failed → {to_addr} | subject: {subject} | {e}")
            return False

        logger.info(f"Mail sent → {to_addr} | cc: {len(cc or [])} | subject: {subject}")
        return True
