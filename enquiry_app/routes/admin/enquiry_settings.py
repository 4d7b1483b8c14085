# enquiry_app/routes/admin/enquiry_settings.py
# Enquiry notification settings - primary recipient + CC list
# - Saving and sending share one validation routine (SettingsService)
# - An invalid primary address is stored empty (sending falls back to the admin email); invalid CC addresses are dropped

from flask import Blueprint, render_template, request, current_app
from flask_login import current_user

from enquiry_app.admin_utils import admin_required, flash_redirect
from enquiry_app.extensions import db

enquiry_settings_bp = Blueprint('enquiry_settings', __name__, url_prefix='/enquiry-settings')


@enquiry_settings_bp.route('/', methods=['GET', 'POST'])
@admin_required
def settings():
    """Enquiry notification settings"""
    service = current_app.extensions['enquiry_settings']

    if request.method == 'POST':
        try:
            saved = service.save(
                request.form.get('notification_email', ''),
                request.form.get('cc_emails', ''),
            )
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Failed to save enquiry settings")
            return flash_redirect("Save failed, please try again.", "danger",
                                  "admin.enquiry_settings.settings")

        current_app.logger.info(
            f"Enquiry settings updated by {current_user.username} | cc: {len(saved.cc_emails)}"
        )
        return flash_redirect("Settings saved.", "success", "admin.enquiry_settings.settings")

    return render_template(
        'admin/enquiry_settings.html',
        settings=service.load(),
        admin_email=service.get_admin_email(),
    )
