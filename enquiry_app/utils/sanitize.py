# enquiry_app/utils/sanitize.py
# Input sanitizers for submitted form values.
# Each function accepts any value (None included) and always returns a clean
# value of the expected type, never raising on bad input.

import logging
import re
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email
from markupsafe import Markup

logger = logging.getLogger(__name__)

ALLOWED_URL_SCHEMES = ('http', 'https', 'ftp', 'ftps', 'mailto')

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_LINE_CONTROL_CHARS = re.compile(r'[\x00-\x09\x0b\x0c\x0e-\x1f\x7f]')
_WHITESPACE_RUN = re.compile(r'[\r\n\t ]+')
_INLINE_SPACE_RUN = re.compile(r'[ \t]+')
_STRAY_ANGLES = re.compile(r'<(?=[^\s])|(?<=[^\s])>')
_EMAIL_ALLOWED = re.compile(r"[^a-zA-Z0-9!#$%&'*+/=?^_`{|}~.@-]")
_LEADING_INT = re.compile(r'\s*([-+]?\d+)')


def _to_str(value) -> str:
    if value is None:
        return ''
    return str(value)


def _strip_tags(value: str) -> str:
    # also unescapes entities and collapses whitespace
    return str(Markup(value).striptags())


def sanitize_text_field(value) -> str:
    """Single-line text: no markup, no control chars, collapsed whitespace."""
    text = _strip_tags(_to_str(value))
    text = _STRAY_ANGLES.sub('', text)
    text = _CONTROL_CHARS.sub('', text)
    return _WHITESPACE_RUN.sub(' ', text).strip()


def sanitize_textarea_field(value) -> str:
    """Multi-line text: like sanitize_text_field but line breaks survive."""
    text = _to_str(value).replace('\r\n', '\n').replace('\r', '\n')
    lines = []
    for line in text.split('\n'):
        line = _strip_tags(line)
        line = _STRAY_ANGLES.sub('', line)
        line = _LINE_CONTROL_CHARS.sub('', line)
        lines.append(_INLINE_SPACE_RUN.sub(' ', line).strip())
    return '\n'.join(lines).strip('\n')


def is_email(value) -> bool:
    """Syntax-only email check (no DNS lookups)."""
    candidate = _to_str(value).strip()
    if not candidate or len(candidate) > 254:
        return False
    try:
        validate_email(candidate, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def sanitize_email(value) -> str:
    """Drop characters that cannot appear in an address; '' when invalid."""
    candidate = _EMAIL_ALLOWED.sub('', _to_str(value).strip())
    if not is_email(candidate):
        return ''
    return candidate


def sanitize_cc_emails(value) -> str:
    """
    Clean a comma-separated address list.
    Invalid entries are dropped silently; survivors are joined with ', '.
    """
    return ', '.join(parse_email_list(value))


def parse_email_list(value) -> list[str]:
    """Split a comma-separated list and keep only valid addresses, in order."""
    if isinstance(value, (list, tuple)):
        parts = [_to_str(v) for v in value]
    else:
        parts = _to_str(value).split(',')

    valid = []
    for part in parts:
        address = part.strip()
        if not address:
            continue
        if is_email(address):
            valid.append(address)
        else:
            logger.debug(f"Dropping invalid email from list: {address!r}")
    return valid


def absint(value) -> int:
    """Coerce to a non-negative integer, 0 on anything unparseable."""
    match = _LEADING_INT.match(_to_str(value))
    if not match:
        return 0
    return abs(int(match.group(1)))


def esc_url_raw(value) -> str:
    """
    Return a well-formed URL suitable for storing or emailing, or ''.
    Absolute URLs need an allowed scheme and a host; site-relative paths
    ('/products/3') pass through.
    """
    url = _CONTROL_CHARS.sub('', _to_str(value)).strip()
    url = url.replace(' ', '%20')
    if not url or any(c in url for c in '<>"\'`\\'):
        return ''

    if url.startswith('/') and not url.startswith('//'):
        return url

    try:
        parts = urlsplit(url)
    except ValueError:
        return ''

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_URL_SCHEMES:
        return ''
    if scheme == 'mailto':
        return url if is_email(parts.path) else ''
    if not parts.netloc:
        return ''
    return url
