from enquiry_app.utils.nonce import create_nonce, verify_nonce


def test_nonce_round_trip(app):
    token = create_nonce('enquiry_submit')
    assert verify_nonce(token, 'enquiry_submit')


def test_nonce_is_bound_to_its_action(app):
    token = create_nonce('enquiry_submit')
    assert not verify_nonce(token, 'other_action')


def test_missing_or_tampered_nonce_is_rejected(app):
    token = create_nonce('enquiry_submit')
    assert not verify_nonce(None, 'enquiry_submit')
    assert not verify_nonce('', 'enquiry_submit')
    assert not verify_nonce(token[:-2] + 'xx', 'enquiry_submit')


def test_expired_nonce_is_rejected(app):
    token = create_nonce('enquiry_submit')
    assert not verify_nonce(token, 'enquiry_submit', max_age=-1)


def test_nonce_depends_on_secret_key(app):
    token = create_nonce('enquiry_submit')
    app.config['SECRET_KEY'] = 'rotated-secret'
    assert not verify_nonce(token, 'enquiry_submit')
