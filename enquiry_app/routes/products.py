# enquiry_app/routes/products.py
from flask import Blueprint, abort, render_template, request, current_app
from sqlalchemy import desc

from enquiry_app.models import Product
from enquiry_app.services.catalog import CatalogService

products_bp = Blueprint('products', __name__, url_prefix='/products')


@products_bp.route('/')
def list_products():
    """
    Product list - paginated, newest first
    """
    page = request.args.get('page', 1, type=int)
    per_page = current_app.config.get('PRODUCTS_PER_PAGE', 12)

    pagination = Product.query.order_by(desc(Product.created_at)).paginate(
        page=page,
        per_page=per_page,
        error_out=False
    )

    return render_template(
        'products/list.html',
        products=pagination.items,
        pagination=pagination,
        is_purchasable=CatalogService.is_purchasable,
    )


@products_bp.route('/<int:product_id>')
@products_bp.route('/<int:product_id>-<slug>')  # friendly URL with slug
def product_detail(product_id, slug=None):
    """
    Product detail
    Looked up by id only; the slug is ignored
    """
    product = CatalogService.get_product(product_id)
    if product is None:
        abort(404)

    return render_template(
        'products/product_detail.html',
        product=product,
        purchasable=CatalogService.is_purchasable(product),
    )
