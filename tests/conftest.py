from decimal import Decimal

import pytest
from werkzeug.security import generate_password_hash

from enquiry_app import create_app
from enquiry_app.extensions import db as _db
from enquiry_app.models import Product, User
from enquiry_app.services.enquiry_service import NONCE_ACTION
from enquiry_app.utils.nonce import create_nonce


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def product(db):
    product = Product(name='Oak Dining Table', slug='oak-dining-table', price=Decimal('899.00'))
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def unpriced_product(db):
    product = Product(name='Walnut Sideboard', slug='walnut-sideboard', price=None, is_active=False)
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def nonce(app):
    return create_nonce(NONCE_ACTION)


@pytest.fixture
def enquiry_form(nonce):
    def build(**overrides):
        form = {
            'action': NONCE_ACTION,
            'nonce': nonce,
            'product_id': '0',
            'product_url': '',
            'name': 'Jane Doe',
            'email': 'jane@x.com',
            'phone': '',
            'state': '',
            'address': '',
            'message': 'Is this available in walnut?',
        }
        form.update(overrides)
        return form
    return build


@pytest.fixture
def admin_user(db):
    user = User(username='admin', password=generate_password_hash('correct-horse'))
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_client(client, admin_user):
    response = client.post('/admin/login', data={'username': 'admin', 'password': 'correct-horse'})
    assert response.status_code == 302
    return client
