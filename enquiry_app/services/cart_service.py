# enquiry_app/services/cart_service.py
from flask import session

from enquiry_app.services.catalog import CatalogService


class CartService:
    """Session-backed cart service (the shop's native add-to-cart action)"""

    CART_KEY = 'cart_items'
    MAX_ITEMS = 50
    MAX_QTY_PER_ITEM = 999

    @staticmethod
    def get_cart() -> list:
        return session.get(CartService.CART_KEY, [])

    @staticmethod
    def add_to_cart(product_id: int, qty: int = 1) -> tuple[bool, str]:
        """
        Add a product to the cart
        Returns: (success: bool, message: str)
        """
        if qty < 1:
            return False, "Quantity must be at least 1"

        product = CatalogService.get_product(product_id)
        if not product or not CatalogService.is_purchasable(product):
            return False, f"Product {product_id} is not available"

        items = CartService.get_cart()

        if len(items) >= CartService.MAX_ITEMS and not any(i['id'] == product_id for i in items):
            return False, f"Cart is full (max {CartService.MAX_ITEMS} products)"

        for item in items:
            if item['id'] == product_id:
                item['qty'] = min(item['qty'] + qty, CartService.MAX_QTY_PER_ITEM)
                break
        else:
            items.append({'id': product.id, 'name': product.name, 'qty': qty})

        session[CartService.CART_KEY] = items
        session.modified = True
        return True, f"Added \"{product.name}\" to your cart"

    @staticmethod
    def get_cart_summary() -> dict:
        items = CartService.get_cart()
        return {
            'total_items': sum(item['qty'] for item in items),
            'unique_items': len(items),
            'is_empty': not items,
        }
