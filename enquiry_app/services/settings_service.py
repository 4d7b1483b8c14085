# enquiry_app/services/settings_service.py
# Enquiry notification settings: primary recipient + CC list.
# The same sanitizers run when the admin saves the form and when an
# enquiry is sent, so a stale or hand-edited option can never leak an
# invalid address into outgoing mail.

import logging
from dataclasses import dataclass, field

from flask import current_app

from enquiry_app.services.options import OptionStore
from enquiry_app.utils.sanitize import (
    is_email, parse_email_list, sanitize_cc_emails, sanitize_email,
)

logger = logging.getLogger(__name__)

NOTIFICATION_EMAIL_OPTION = 'enquiry_notification_email'
CC_EMAILS_OPTION = 'enquiry_cc_emails'
ADMIN_EMAIL_OPTION = 'admin_email'


@dataclass
class NotificationSettings:
    notification_email: str = ''
    cc_emails: list[str] = field(default_factory=list)

    @property
    def cc_raw(self) -> str:
        return ', '.join(self.cc_emails)


class SettingsService:
    def __init__(self, store: OptionStore | None = None):
        self.store = store or OptionStore()

    def get_notification_email(self) -> str:
        value = self.store.get(NOTIFICATION_EMAIL_OPTION, '').strip()
        return value if is_email(value) else ''

    def get_cc_emails(self) -> list[str]:
        return parse_email_list(self.store.get(CC_EMAILS_OPTION, ''))

    def get_admin_email(self) -> str:
        """Site administrator address (options table, then ADMIN_EMAIL config)."""
        value = self.store.get(ADMIN_EMAIL_OPTION, '').strip()
        if is_email(value):
            return value
        return current_app.config.get('ADMIN_EMAIL', '')

    def load(self) -> NotificationSettings:
        return NotificationSettings(
            notification_email=self.get_notification_email(),
            cc_emails=self.get_cc_emails(),
        )

    def save(self, notification_email: str, cc_emails: str) -> NotificationSettings:
        """Validate and persist both settings; returns what was stored."""
        clean_email = sanitize_email(notification_email)
        clean_cc = sanitize_cc_emails(cc_emails)

        if notification_email and notification_email.strip() and not clean_email:
            logger.warning(f"Rejected invalid notification email: {notification_email!r}")

        self.store.update(NOTIFICATION_EMAIL_OPTION, clean_email)
        self.store.update(CC_EMAILS_OPTION, clean_cc)

        return NotificationSettings(
            notification_email=clean_email,
            cc_emails=parse_email_list(clean_cc),
        )
