# enquiry_app/context_processors.py
# Template context processors

from flask import current_app, url_for
from time import time

from enquiry_app.assets import scripts
from enquiry_app.services.enquiry_service import ERROR_MESSAGE, NONCE_ACTION, SUCCESS_MESSAGE
from enquiry_app.utils.nonce import create_nonce


def inject_timestamp():
    return dict(current_timestamp=int(time()))


def inject_enquiry_assets():
    """Script list + client config for the enquiry modal (empty when disabled)."""
    if not current_app.config.get('ENQUIRY_ENABLED'):
        return dict(enquiry_enabled=False, enquiry_scripts=[], enquiry_config=None)

    nonce = create_nonce(NONCE_ACTION)
    return dict(
        enquiry_enabled=True,
        enquiry_scripts=scripts.ordered(['enquiry']),
        enquiry_nonce_action=NONCE_ACTION,
        enquiry_nonce=nonce,
        enquiry_config={
            'ajax_url': url_for('enquiry.submit'),
            'nonce': nonce,
            'success_message': SUCCESS_MESSAGE,
            'error_message': ERROR_MESSAGE,
            'reload_delay': current_app.config.get('ENQUIRY_RELOAD_DELAY_MS', 2500),
        },
    )


def register_context_processors(app):
    """Register all context processors"""
    app.context_processor(inject_timestamp)
    app.context_processor(inject_enquiry_assets)
