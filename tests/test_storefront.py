import json
import re

from enquiry_app import create_app
from enquiry_app.extensions import db


def test_home_renders_modal_contract(client, product):
    page = client.get('/').get_data(as_text=True)

    assert 'id="enquiry-modal"' in page
    assert 'aria-hidden="true"' in page
    assert 'role="dialog"' in page
    assert 'aria-labelledby="enquiry-title"' in page
    assert 'id="enquiry-close"' in page
    for field in ('action', 'nonce', 'product_id', 'product_url',
                  'name', 'email', 'phone', 'state', 'address', 'message'):
        assert f'name="{field}"' in page


def test_enquiry_script_loads_after_add_to_cart(client, product):
    page = client.get('/products/').get_data(as_text=True)

    assert page.index('js/add-to-cart.js') < page.index('js/enquiry.js')


def test_client_config_is_localized(client):
    page = client.get('/').get_data(as_text=True)

    match = re.search(r'window\.EnquiryConfig = (\{.*?\});</script>', page)
    assert match
    config = json.loads(match.group(1))
    assert config['ajax_url'] == '/enquiry/submit'
    assert config['nonce']
    assert config['success_message']
    assert config['error_message']
    assert config['reload_delay'] == 2500


def test_rendered_nonce_is_accepted(client, enquiry_form):
    page = client.get('/').get_data(as_text=True)
    nonce = re.search(r'name="nonce" value="([^"]+)"', page).group(1)

    response = client.post('/enquiry/submit', data=enquiry_form(nonce=nonce))

    assert response.get_json()['success'] is True


def test_product_card_exposes_context(client, product):
    page = client.get('/products/').get_data(as_text=True)

    assert f'data-product_id="{product.id}"' in page
    assert 'data-product_name="Oak Dining Table"' in page
    assert 'class="product-loop-link"' in page
    assert 'class="product-loop-title"' in page


def test_product_without_price_still_shows_add_to_cart(client, unpriced_product):
    page = client.get('/products/').get_data(as_text=True)

    assert f'data-product_id="{unpriced_product.id}"' in page
    assert 'add_to_cart_button' in page


def test_product_detail_has_single_add_to_cart(client, product):
    page = client.get(f'/products/{product.id}-oak-dining-table').get_data(as_text=True)

    assert '<h1 class="product_title">Oak Dining Table</h1>' in page
    assert 'single_add_to_cart_button' in page
    assert f'value="{product.id}"' in page


def test_unknown_product_is_404(client):
    assert client.get('/products/999').status_code == 404


def test_native_add_to_cart(client, product):
    response = client.post(f'/cart/add/{product.id}', headers={'Accept': 'application/json'})

    payload = response.get_json()
    assert payload['success'] is True
    assert payload['cart']['total_items'] == 1


def test_inactive_priced_product_cannot_be_added(client, product):
    product.is_active = False
    db.session.commit()

    response = client.post(f'/cart/add/{product.id}', headers={'Accept': 'application/json'})

    assert response.status_code == 400
    assert client.get('/cart/summary').get_json()['is_empty'] is True


def test_disabled_feature_renders_no_modal():
    app = create_app('testing', ENQUIRY_ENABLED=False)
    with app.app_context():
        db.create_all()
        page = app.test_client().get('/').get_data(as_text=True)
        db.drop_all()

    assert 'enquiry-modal' not in page
    assert 'js/enquiry.js' not in page
