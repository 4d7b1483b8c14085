import smtplib

from enquiry_app.extensions import mail
from enquiry_app.services.settings_service import SettingsService


def test_submit_success_sends_mail(client, enquiry_form):
    with mail.record_messages() as outbox:
        response = client.post('/enquiry/submit', data=enquiry_form())

    assert response.status_code == 200
    payload = response.get_json()
    assert payload['success'] is True
    assert payload['data']

    assert len(outbox) == 1
    msg = outbox[0]
    assert msg.subject == 'New product enquiry from Jane Doe'
    assert msg.recipients == ['owner@shop.co.uk']  # ADMIN_EMAIL fallback
    assert msg.reply_to == 'Jane Doe <jane@x.com>'
    assert msg.cc == []


def test_submit_uses_configured_recipient_and_cc(app, client, enquiry_form):
    SettingsService().save('sales@x.com', 'a@x.com, not-an-email, b@x.com')

    with mail.record_messages() as outbox:
        client.post('/enquiry/submit', data=enquiry_form())

    msg = outbox[0]
    assert msg.recipients == ['sales@x.com']
    assert msg.cc == ['a@x.com', 'b@x.com']
    assert msg.send_to == {'sales@x.com', 'a@x.com', 'b@x.com'}


def test_submit_uses_product_permalink(client, product, enquiry_form):
    form = enquiry_form(product_id=str(product.id), product_url='http://evil.example')

    with mail.record_messages() as outbox:
        client.post('/enquiry/submit', data=form)

    body = outbox[0].body
    assert f'Product URL: http://shop.test/products/{product.id}-oak-dining-table' in body
    assert 'Product: Oak Dining Table' in body
    assert 'evil.example' not in body


def test_bad_nonce_returns_403_payload(client, enquiry_form):
    with mail.record_messages() as outbox:
        response = client.post('/enquiry/submit', data=enquiry_form(nonce='forged'))

    assert response.status_code == 403
    payload = response.get_json()
    assert payload['success'] is False
    assert payload['data']
    assert outbox == []


def test_missing_required_field_returns_400_payload(client, enquiry_form):
    response = client.post('/enquiry/submit', data=enquiry_form(name=''))

    assert response.status_code == 400
    assert response.get_json() == {
        'success': False,
        'data': 'Please fill in all required fields (Name, Email, Comment).',
    }


def test_transport_failure_returns_500_payload(client, enquiry_form, monkeypatch):
    def refuse(msg):
        raise smtplib.SMTPServerDisconnected('connection lost')

    monkeypatch.setattr(mail, 'send', refuse)
    response = client.post('/enquiry/submit', data=enquiry_form())

    assert response.status_code == 500
    assert response.get_json() == {
        'success': False,
        'data': 'Unable to send email. Please try again later.',
    }


def test_resubmission_after_failure_succeeds(client, enquiry_form, monkeypatch):
    def refuse(msg):
        raise OSError('connection refused')

    form = enquiry_form()
    with monkeypatch.context() as m:
        m.setattr(mail, 'send', refuse)
        assert client.post('/enquiry/submit', data=form).status_code == 500

    with mail.record_messages() as outbox:
        response = client.post('/enquiry/submit', data=form)

    assert response.get_json()['success'] is True
    assert len(outbox) == 1


def test_anonymous_and_logged_in_visitors_can_submit(admin_client, enquiry_form):
    response = admin_client.post('/enquiry/submit', data=enquiry_form())

    assert response.get_json()['success'] is True


def test_get_is_not_allowed(client):
    response = client.get('/enquiry/submit')

    assert response.status_code == 405
    assert response.get_json()['success'] is False


def test_out_of_range_product_id_is_treated_as_unknown(client, enquiry_form):
    form = enquiry_form(product_id='9' * 25, product_url='https://shop.test/products/oak')

    with mail.record_messages() as outbox:
        response = client.post('/enquiry/submit', data=form)

    assert response.status_code == 200
    assert response.get_json()['success'] is True
    assert len(outbox) == 1
    assert 'Product URL: https://shop.test/products/oak' in outbox[0].body
    assert 'Product: ' not in outbox[0].body


def test_out_of_range_ids_on_storefront_routes(client):
    huge = '9' * 25

    assert client.get(f'/products/{huge}').status_code == 404
    response = client.post(f'/cart/add/{huge}', headers={'Accept': 'application/json'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False
