# enquiry_app/__init__.py
# Flask application factory
# - Config class picked by config_name or FLASK_ENV; environment variables win
# - Creates the instance directory
# - Builds the enquiry service from its collaborators (mail, settings, catalog) and stores it on app.extensions
# - Blueprint order: public → products → cart/enquiry → admin

import os
from pathlib import Path
from flask import Flask

from enquiry_app.config import DEV_SECRET_KEY, config_by_name
from enquiry_app.extensions import db, login_manager, init_extensions
from enquiry_app.context_processors import register_context_processors
from enquiry_app.error_handlers import register_error_handlers

from enquiry_app.routes.main import main_bp
from enquiry_app.routes.products import products_bp
from enquiry_app.routes.cart import cart_bp
from enquiry_app.routes.enquiry import enquiry_bp
from enquiry_app.routes.admin import admin_bp

from enquiry_app.services.catalog import CatalogService
from enquiry_app.services.enquiry_service import EnquiryService
from enquiry_app.services.mail_service import MailService
from enquiry_app.services.settings_service import SettingsService


def create_app(config_name: str | None = None, **overrides) -> Flask:
    """
    Flask application factory

    Environments:
    - FLASK_ENV=development / production / testing
    - Overridable via environment variables, instance/config.py or overrides
    """
    app = Flask(__name__,
                instance_relative_config=True,
                static_folder='static',
                template_folder='templates')

    os.makedirs(app.instance_path, exist_ok=True)

    # =====================================
    # 1. Configuration
    # =====================================
    flask_env = config_name or os.environ.get('FLASK_ENV', 'development')
    app.config.from_object(config_by_name.get(flask_env, config_by_name['development']))
    app.config['ENV'] = flask_env

    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = f"sqlite:///{Path(app.instance_path) / 'site.db'}"

    if not app.config['TESTING']:
        app.config.from_pyfile('config.py', silent=True)
    app.config.update(overrides)

    if app.config['SECRET_KEY'] == DEV_SECRET_KEY:
        app.logger.warning("!!! Using the insecure default SECRET_KEY !!! "
                           "Set FLASK_SECRET_KEY before running in production")

    # =====================================
    # 2. Extensions & enquiry service
    # =====================================
    init_extensions(app)

    settings_service = SettingsService()
    app.extensions['enquiry_settings'] = settings_service
    app.extensions['enquiry_service'] = EnquiryService(
        mail_transport=MailService(),
        settings_store=settings_service,
        catalog=CatalogService(),
    )

    # =====================================
    # 3. Blueprints
    # =====================================
    app.register_blueprint(main_bp)
    app.register_blueprint(products_bp, url_prefix='/products')
    app.register_blueprint(cart_bp, url_prefix='/cart')
    app.register_blueprint(enquiry_bp, url_prefix='/enquiry')
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # =====================================
    # 4. Context processors & error handlers
    # =====================================
    register_context_processors(app)
    register_error_handlers(app)

    from enquiry_app.models import User

    @login_manager.user_loader
    def load_user(user_id: str):
        return db.session.get(User, int(user_id))

    db_type = app.config['SQLALCHEMY_DATABASE_URI'].split('://')[0]
    app.logger.info(
        f"Flask app ready | "
        f"env: {flask_env} | "
        f"debug: {app.debug} | "
        f"database: {db_type} | "
        f"enquiry enabled: {app.config['ENQUIRY_ENABLED']}"
    )

    return app
