# enquiry_app/config.py
# Configuration classes, selected by create_app(config_name) or FLASK_ENV.
# Environment variables always win over the class defaults.

import os

DEV_SECRET_KEY = 'dev-insecure-key-please-change-immediately'


class Config:
    SECRET_KEY = os.environ.get('FLASK_SECRET_KEY') or DEV_SECRET_KEY
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')  # None -> instance/site.db
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Outbound mail (Flask-Mail)
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'localhost')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 25))
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', '').lower() in ('1', 'true', 'yes')
    MAIL_USE_SSL = os.environ.get('MAIL_USE_SSL', '').lower() in ('1', 'true', 'yes')
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER', 'shop@localhost')

    # Site administrator address, last resort for enquiry notifications
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@localhost')

    # Enquiry feature
    ENQUIRY_ENABLED = True
    ENQUIRY_NONCE_MAX_AGE = 24 * 3600
    ENQUIRY_RELOAD_DELAY_MS = 2500
    PRODUCTS_PER_PAGE = 12


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = 'shop@shop.co.uk'
    ADMIN_EMAIL = 'owner@shop.co.uk'
    SERVER_NAME = 'shop.test'


config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}
