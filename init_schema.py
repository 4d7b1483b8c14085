# init_schema.py
# Database bootstrap: tables + default admin + sample products + enquiry settings
# Development only; use `flask db upgrade` in production

import os
from decimal import Decimal

from werkzeug.security import generate_password_hash

from enquiry_app import create_app
from enquiry_app.extensions import db
from enquiry_app.models import User, Product
from enquiry_app.services.settings_service import SettingsService

app = create_app()

with app.app_context():
    print("Initialising database...")

    db.create_all()
    print("Tables created (user, options, product).")

    if not User.query.filter_by(username='admin').first():
        admin_password = os.environ.get('ADMIN_PASSWORD', 'admin123')
        db.session.add(User(username='admin', password=generate_password_hash(admin_password)))
        print("Admin account created: admin")

    if Product.query.count() == 0:
        samples = [
            Product(name='Oak Dining Table', slug='oak-dining-table', price=Decimal('899.00'),
                    description='Solid oak, seats six.'),
            Product(name='Walnut Sideboard', slug='walnut-sideboard', price=None,
                    description='Made to order. Price on request.'),
            Product(name='Linen Armchair', slug='linen-armchair', price=Decimal('349.00')),
        ]
        db.session.add_all(samples)
        print(f"{len(samples)} sample products added.")

    db.session.commit()

    settings = SettingsService()
    if not settings.get_notification_email():
        saved = settings.save(os.environ.get('ENQUIRY_NOTIFICATION_EMAIL', ''),
                              os.environ.get('ENQUIRY_CC_EMAILS', ''))
        print(f"Enquiry notifications → {saved.notification_email or settings.get_admin_email()}")

    print("Done.")
