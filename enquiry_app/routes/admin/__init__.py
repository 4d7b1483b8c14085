"""
Admin blueprint entry point
Registers the sub-blueprints: login/index → enquiry settings
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

from .main import main_bp                         # login, index, logout
from .enquiry_settings import enquiry_settings_bp  # enquiry notification settings

admin_bp.register_blueprint(main_bp)
admin_bp.register_blueprint(enquiry_settings_bp)
