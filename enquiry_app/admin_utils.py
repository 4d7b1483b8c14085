# enquiry_app/admin_utils.py
# Shared admin helpers (kept outside routes/admin to avoid circular imports)
# Usage: from enquiry_app.admin_utils import admin_required, flash_redirect

from functools import wraps
from flask import flash, redirect, url_for, request
from flask_login import current_user


def admin_required(f):
    """Login check for admin views"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('Please login to access the admin panel', 'warning')
            return redirect(url_for('admin.main.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


def flash_redirect(message, category='info', endpoint='admin.main.index', **kwargs):
    """
    Flash a message and redirect
    Example:
    return flash_redirect("Saved", "success", "admin.enquiry_settings.settings")
    """
    flash(message, category)
    return redirect(url_for(endpoint, **kwargs))
