# enquiry_app/services/enquiry_service.py
# Product enquiry submission pipeline.
# token check → sanitize → required fields → product → recipient → body →
# headers → dispatch. Errors are raised as EnquiryError subclasses; handle()
# turns every outcome into the same (success, message) result.

import logging
from dataclasses import dataclass
from email.utils import formataddr
from typing import Mapping, Optional, Protocol

from enquiry_app.errors import (
    AuthenticationError, DispatchError, EnquiryError, ValidationError,
)
from enquiry_app.utils.nonce import verify_nonce
from enquiry_app.utils.sanitize import (
    absint, esc_url_raw, is_email, sanitize_email, sanitize_text_field,
    sanitize_textarea_field,
)

logger = logging.getLogger(__name__)

NONCE_ACTION = 'enquiry_submit'
SUCCESS_MESSAGE = 'Thank you for your enquiry. Our team will contact you shortly.'
ERROR_MESSAGE = 'Something went wrong. Please try again.'


class MailTransport(Protocol):
    def send(self, to_addr: str, subject: str, body: str,
             reply_to: Optional[str] = None, cc: Optional[list] = None) -> bool: ...


class SettingsStore(Protocol):
    def get_notification_email(self) -> str: ...
    def get_cc_emails(self) -> list: ...
    def get_admin_email(self) -> str: ...


class ProductCatalog(Protocol):
    def get_permalink(self, product_id: int) -> Optional[str]: ...
    def get_title(self, product_id: int) -> Optional[str]: ...


@dataclass(frozen=True)
class EnquiryRequest:
    name: str
    email: str
    message: str
    phone: str = ''
    region: str = ''
    address: str = ''
    product_id: int = 0
    product_url: str = ''

    @classmethod
    def from_form(cls, form: Mapping) -> 'EnquiryRequest':
        """Build a request from raw form values, sanitizing every field."""
        return cls(
            name=sanitize_text_field(form.get('name')),
            email=sanitize_email(form.get('email')),
            phone=sanitize_text_field(form.get('phone')),
            region=sanitize_text_field(form.get('state')),
            address=sanitize_text_field(form.get('address')),
            message=sanitize_textarea_field(form.get('message')),
            product_id=absint(form.get('product_id')),
            product_url=esc_url_raw(form.get('product_url')),
        )


@dataclass(frozen=True)
class EnquiryResult:
    success: bool
    message: str
    status_code: int = 200

    def to_payload(self) -> dict:
        return {'success': self.success, 'data': self.message}


@dataclass(frozen=True)
class ComposedEmail:
    to_addr: str
    subject: str
    body: str
    reply_to: Optional[str] = None
    cc: tuple = ()


class EnquiryService:
    """Turns a submitted enquiry form into one notification email."""

    def __init__(self, mail_transport: MailTransport, settings_store: SettingsStore,
                 catalog: ProductCatalog):
        self.mail_transport = mail_transport
        self.settings_store = settings_store
        self.catalog = catalog

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------
    @staticmethod
    def check_token(form: Mapping) -> None:
        if form.get('action') != NONCE_ACTION:
            raise AuthenticationError()
        if not verify_nonce(form.get('nonce'), NONCE_ACTION):
            raise AuthenticationError()

    @staticmethod
    def validate(enquiry: EnquiryRequest) -> None:
        if not enquiry.name or not enquiry.email or not enquiry.message:
            raise ValidationError()

    def resolve_recipient(self) -> str:
        recipient = self.settings_store.get_notification_email()
        if recipient and is_email(recipient):
            return recipient
        return self.settings_store.get_admin_email()

    def compose(self, enquiry: EnquiryRequest) -> ComposedEmail:
        product_url = enquiry.product_url
        product_title = None

        if enquiry.product_id:
            permalink = self.catalog.get_permalink(enquiry.product_id)
            if permalink:
                product_url = permalink
            product_title = self.catalog.get_title(enquiry.product_id)

        lines = [
            'You have received a new product enquiry:',
            '',
            f'Name: {enquiry.name}',
            f'Email: {enquiry.email}',
        ]
        if enquiry.phone:
            lines.append(f'Phone: {enquiry.phone}')
        if enquiry.region:
            lines.append(f'State / Region: {enquiry.region}')
        if enquiry.address:
            lines.append(f'Address: {enquiry.address}')

        lines.append('')
        if product_title:
            lines.append(f'Product: {product_title}')
        if product_url:
            lines.append(f'Product URL: {product_url}')

        lines.extend(['', 'Message:', enquiry.message])
        body = '\n'.join(lines) + '\n'

        reply_to = None
        if enquiry.email and is_email(enquiry.email):
            reply_to = formataddr((enquiry.name, enquiry.email))

        cc = [address for address in self.settings_store.get_cc_emails() if is_email(address)]

        return ComposedEmail(
            to_addr=self.resolve_recipient(),
            subject=f'New product enquiry from {enquiry.name}',
            body=body,
            reply_to=reply_to,
            cc=tuple(cc),
        )

    def dispatch(self, email: ComposedEmail) -> None:
        sent = self.mail_transport.send(
            email.to_addr,
            email.subject,
            email.body,
            reply_to=email.reply_to,
            cc=list(email.cc),
        )
        if not sent:
            raise DispatchError()

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def submit(self, form: Mapping) -> EnquiryRequest:
        """Run the whole pipeline, raising EnquiryError on any failure."""
        self.check_token(form)

        enquiry = EnquiryRequest.from_form(form)
        self.validate(enquiry)

        email = self.compose(enquiry)
        self.dispatch(email)

        logger.info(
            f"Enquiry sent → {email.to_addr} | product: {enquiry.product_id or '-'} | cc: {len(email.cc)}"
        )
        return enquiry

    def handle(self, form: Mapping) -> EnquiryResult:
        try:
            self.submit(form)
        except AuthenticationError as e:
            logger.warning("Enquiry rejected: invalid or missing nonce")
            return EnquiryResult(False, e.message, e.status_code)
        except EnquiryError as e:
            logger.info(f"Enquiry not sent: {type(e).__name__}")
            return EnquiryResult(False, e.message, e.status_code)

        return EnquiryResult(True, SUCCESS_MESSAGE)
