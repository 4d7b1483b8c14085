# enquiry_app/extensions.py
# Extension singletons, bound to the app in create_app()

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_mail import Mail

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
mail = Mail()   # enquiry notifications


def init_extensions(app):
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)

    # Only the admin settings page needs a login; storefront and enquiry
    # submission stay anonymous.
    login_manager.init_app(app)
    login_manager.login_view = 'admin.main.login'
    login_manager.login_message = 'Please log in to manage enquiry settings'
    login_manager.login_message_category = 'warning'
    login_manager.session_protection = 'strong'
