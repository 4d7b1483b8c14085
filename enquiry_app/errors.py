# enquiry_app/errors.py
# Enquiry error taxonomy. Every error carries the user-facing message and
# the HTTP status the JSON endpoint answers with.


class EnquiryError(Exception):
    """Base class for errors surfaced to the enquiry form."""

    status_code = 400
    default_message = 'Something went wrong. Please try again.'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationError(EnquiryError):
    """Missing or invalid anti-forgery token."""

    status_code = 403
    default_message = 'Security check failed. Please reload the page and try again.'


class ValidationError(EnquiryError):
    status_code = 400
    default_message = 'Please fill in all required fields (Name, Email, Comment).'


class DispatchError(EnquiryError):
    """The mail transport reported that the notification was not sent."""

    status_code = 500
    default_message = 'Unable to send email. Please try again later.'
