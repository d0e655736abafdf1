"""Static canteen menu with category filtering."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from app.core.exceptions import ProductNotFoundException, VarietyNotFoundException
from app.domain.entities import CartItem, Product, Variety

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"

DEFAULT_MENU: tuple[Product, ...] = (
    Product(
        id="samosa",
        name="Samosa",
        category="Snacks",
        image="/images/samosa.jpg",
        description="Crispy pastry with spiced potato filling",
        varieties=(Variety(name="", price=15),),
    ),
    Product(
        id="vada-pav",
        name="Vada Pav",
        category="Snacks",
        image="/images/vada-pav.jpg",
        description="Potato fritter in a soft bun with chutney",
        varieties=(Variety(name="Regular", price=20), Variety(name="Cheese", price=35)),
    ),
    Product(
        id="sandwich",
        name="Sandwich",
        category="Snacks",
        image="/images/sandwich.jpg",
        varieties=(
            Variety(name="Veg", price=40),
            Variety(name="Grilled", price=60),
            Variety(name="Cheese Grilled", price=75),
        ),
    ),
    Product(
        id="masala-dosa",
        name="Masala Dosa",
        category="Meals",
        image="/images/masala-dosa.jpg",
        varieties=(Variety(name="", price=60),),
    ),
    Product(
        id="thali",
        name="Veg Thali",
        category="Meals",
        image="/images/thali.jpg",
        description="Rice, dal, two sabzis, roti and salad",
        varieties=(Variety(name="Regular", price=90), Variety(name="Special", price=130)),
    ),
    Product(
        id="chai",
        name="Chai",
        category="Beverages",
        image="/images/chai.jpg",
        varieties=(Variety(name="Small", price=10), Variety(name="Large", price=15)),
    ),
    Product(
        id="cold-coffee",
        name="Cold Coffee",
        category="Beverages",
        image="/images/cold-coffee.jpg",
        varieties=(Variety(name="Regular", price=50), Variety(name="With Ice Cream", price=70)),
    ),
    Product(
        id="gulab-jamun",
        name="Gulab Jamun",
        category="Desserts",
        image="/images/gulab-jamun.jpg",
        varieties=(Variety(name="2 pcs", price=30), Variety(name="4 pcs", price=55)),
    ),
)


class CatalogService:
    """Read access to the product list.

    The list is static for the lifetime of the service; ``set_price`` exists
    for menu updates and never touches carts that already hold the item.
    """

    def __init__(self, products: Iterable[Product] = DEFAULT_MENU) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product ID in catalog: {product.id}")
            self._products[product.id] = product

    def categories(self) -> list[str]:
        """``"All"`` followed by each category in menu order."""
        seen: list[str] = []
        for product in self._products.values():
            if product.category not in seen:
                seen.append(product.category)
        return [ALL_CATEGORIES, *seen]

    def list_products(self, category: str | None = ALL_CATEGORIES) -> list[Product]:
        if not category or category == ALL_CATEGORIES:
            return list(self._products.values())
        return [product for product in self._products.values() if product.category == category]

    def get_product(self, product_id: str) -> Product:
        product = self._products.get(str(product_id))
        if product is None:
            raise ProductNotFoundException(str(product_id))
        return product

    def get_variety(self, product_id: str, variety_name: str | None) -> Variety:
        product = self.get_product(product_id)
        variety = product.get_variety(variety_name or "")
        if variety is None:
            raise VarietyNotFoundException(product.id, variety_name or "")
        return variety

    def build_cart_item(self, product_id: str, variety_name: str | None = "") -> CartItem:
        """Cart line for a product pick, priced at the current menu price."""
        product = self.get_product(product_id)
        variety = self.get_variety(product_id, variety_name)
        return CartItem(
            product_id=product.id,
            variety_name=variety.name,
            product_name=product.name,
            image=product.image,
            price=variety.price,
        )

    def set_price(self, product_id: str, variety_name: str | None, price: int) -> Product:
        product = self.get_product(product_id)
        self.get_variety(product_id, variety_name)
        varieties = tuple(
            Variety(name=variety.name, price=price) if variety.name == (variety_name or "") else variety
            for variety in product.varieties
        )
        updated = product.model_copy(update={"varieties": varieties})
        self._products[product.id] = updated
        logger.info("Price of %s/%s set to %s", product.id, variety_name or "-", price)
        return updated
