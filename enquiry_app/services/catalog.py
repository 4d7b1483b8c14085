# enquiry_app/services/catalog.py
# Read-only view of the product catalog used by the enquiry flow.

from flask import url_for

from enquiry_app.extensions import db
from enquiry_app.models import Product

# Largest id a SQL BIGINT column can hold; anything above cannot exist
MAX_PRODUCT_ID = 2 ** 63 - 1


class CatalogService:
    @staticmethod
    def get_product(product_id: int) -> Product | None:
        if not product_id or product_id > MAX_PRODUCT_ID:
            return None
        return db.session.get(Product, product_id)

    @staticmethod
    def permalink(product: Product) -> str:
        return url_for(
            'products.product_detail',
            product_id=product.id,
            slug=product.slug or None,
            _external=True,
        )

    def get_permalink(self, product_id: int) -> str | None:
        product = self.get_product(product_id)
        return self.permalink(product) if product else None

    def get_title(self, product_id: int) -> str | None:
        product = self.get_product(product_id)
        return product.name if product else None

    @staticmethod
    def is_purchasable(product: Product) -> bool:
        """
        Products without a price stay purchasable, so the add-to-cart
        control (and with it the enquiry modal) is shown for them too.
        """
        if product.price is None:
            return True
        return bool(product.is_active)
