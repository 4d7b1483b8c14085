# enquiry_app/routes/main.py
# Storefront main blueprint

from flask import Blueprint, render_template
from sqlalchemy import desc

from enquiry_app.models import Product
from enquiry_app.services.catalog import CatalogService

main_bp = Blueprint('main', __name__)

HOME_PRODUCT_LIMIT = 8


# Homepage: latest products grid
@main_bp.route('/')
def index():
    products = Product.query.order_by(desc(Product.created_at)).limit(HOME_PRODUCT_LIMIT).all()
    return render_template(
        'index.html',
        products=products,
        is_purchasable=CatalogService.is_purchasable,
    )
