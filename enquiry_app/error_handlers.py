# enquiry_app/error_handlers.py
from flask import render_template, jsonify, request, current_app


def _wants_json():
    return request.path.startswith('/enquiry') or request.path.startswith('/cart')


def register_error_handlers(app):
    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'success': False, 'data': 'Not found.'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(403)
    def forbidden(e):
        return render_template('errors/403.html'), 403

    @app.errorhandler(405)
    def method_not_allowed(e):
        if _wants_json():
            return jsonify({'success': False, 'data': 'Method not allowed.'}), 405
        return render_template('errors/404.html'), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        current_app.logger.error(f"500 Internal Server Error: {str(e)}")
        if _wants_json():
            return jsonify({'success': False, 'data': 'Something went wrong. Please try again.'}), 500
        return render_template('errors/500.html'), 500
