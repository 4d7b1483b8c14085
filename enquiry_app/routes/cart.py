# enquiry_app/routes/cart.py
# Native add-to-cart endpoint. On storefront pages the enquiry script
# intercepts every add-to-cart control, so this is only reached when the
# enquiry feature is disabled or JavaScript is off.

from flask import Blueprint, jsonify, redirect, request, url_for, flash

from enquiry_app.services.cart_service import CartService

cart_bp = Blueprint('cart', __name__, url_prefix='/cart')


@cart_bp.route('/add/<int:product_id>', methods=['GET', 'POST'])
def add(product_id):
    qty = request.values.get('quantity', 1, type=int)
    success, message = CartService.add_to_cart(product_id, qty)

    if request.accept_mimetypes.best == 'application/json' or request.is_json:
        return jsonify({
            'success': success,
            'message': message,
            'cart': CartService.get_cart_summary(),
        }), 200 if success else 400

    flash(message, 'success' if success else 'danger')
    return redirect(request.referrer or url_for('products.list_products'))


@cart_bp.route('/summary', methods=['GET'])
def cart_summary():
    return jsonify(CartService.get_cart_summary())
