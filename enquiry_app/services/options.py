# enquiry_app/services/options.py
# Generic key/value options storage backed by the `options` table.

import logging

from enquiry_app.extensions import db
from enquiry_app.models import Option

logger = logging.getLogger(__name__)


class OptionStore:
    """Read and write named string options."""

    @staticmethod
    def get(name: str, default: str = '') -> str:
        option = Option.query.filter_by(name=name).first()
        if option is None or option.value is None:
            return default
        return option.value

    @staticmethod
    def update(name: str, value: str) -> None:
        option = Option.query.filter_by(name=name).first()
        if option is None:
            option = Option(name=name)
            db.session.add(option)
        option.value = value or ''
        db.session.commit()
        logger.info(f"Option updated: {name}")
