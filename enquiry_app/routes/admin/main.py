# enquiry_app/routes/admin/main.py
# Admin core routes (login / index / logout)
# - Failed logins are logged as warnings
# - `next` is restricted to /admin paths (no open redirect)

from flask import Blueprint, render_template, request, redirect, url_for, current_app
from flask_login import current_user, login_user, logout_user
from werkzeug.security import check_password_hash

from enquiry_app.models import User
from enquiry_app.admin_utils import admin_required, flash_redirect

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
@admin_required
def index():
    """Admin index"""
    return redirect(url_for('admin.enquiry_settings.settings'))


@main_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('admin.main.index'))

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')
        remember = 'remember' in request.form

        if not username or not password:
            return flash_redirect("Username and password are required", "danger", "admin.main.login")

        user = User.query.filter_by(username=username).first()

        if user and check_password_hash(user.password, password):
            login_user(user, remember=remember)
            current_app.logger.info(f"Admin login: {username} from {request.remote_addr}")

            next_page = request.args.get('next')
            if next_page and '//' not in next_page and next_page.startswith('/admin'):
                return redirect(next_page)
            return flash_redirect("Welcome back!", "success", "admin.main.index")

        current_app.logger.warning(f"Admin login failed: {username} from {request.remote_addr}")
        return flash_redirect("Invalid username or password", "danger", "admin.main.login")

    return render_template('admin/login.html')


@main_bp.route('/logout')
@admin_required
def logout():
    username = current_user.username
    logout_user()
    current_app.logger.info(f"Admin logged out: {username}")
    return flash_redirect("You have been logged out", "info", "main.index")
