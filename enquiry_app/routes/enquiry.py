# enquiry_app/routes/enquiry.py
# Enquiry submission endpoint - thin route layer.
# Accepts anonymous and logged-in visitors; all business logic lives in
# EnquiryService. Every outcome answers {"success": bool, "data": str}.

from flask import Blueprint, current_app, jsonify, request

from enquiry_app.services.enquiry_service import ERROR_MESSAGE

enquiry_bp = Blueprint('enquiry', __name__, url_prefix='/enquiry')


@enquiry_bp.route('/submit', methods=['POST'])
def submit():
    service = current_app.extensions['enquiry_service']

    try:
        result = service.handle(request.form)
    except Exception:
        current_app.logger.exception("Unexpected error in enquiry/submit")
        return jsonify({'success': False, 'data': ERROR_MESSAGE}), 500

    if not result.success:
        current_app.logger.info(
            f"Enquiry failed ({result.status_code}) from {request.remote_addr}"
        )
    return jsonify(result.to_payload()), result.status_code
