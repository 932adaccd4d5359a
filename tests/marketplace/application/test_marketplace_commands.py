"""Application tests: commands processed through the marketplace domain."""

import json
from datetime import date

import pytest
from marketplace.category.category import Category
from marketplace.category.management import CreateCategory, chip_categories
from marketplace.order.order import Order
from marketplace.order.placement import PlaceOrder
from marketplace.product.creation import CreateProduct
from marketplace.product.product import Product, ProductStatus
from marketplace.product.stock import UpdateProductStock
from marketplace.user.authentication import InvalidCredentialsError, authenticate
from marketplace.user.preferences import AddUserPreferences
from marketplace.user.registration import RegisterUser
from marketplace.user.user import User
from marketplace.utils.security import decode_token
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _register(email="seller@example.com", role="seller", password="Secret123", **extra):
    return current_domain.process(
        RegisterUser(
            name=extra.pop("name", "Sita"),
            email=email,
            password=password,
            role=role,
            phone_number="9800000000",
            location="Kathmandu",
            latitude=extra.pop("latitude", 27.7),
            longitude=extra.pop("longitude", 85.3),
        ),
        asynchronous=False,
    )


def _category(name="Pizza", emoji="🍕"):
    return current_domain.process(CreateCategory(name=name, emoji=emoji), asynchronous=False)


def _list_product(seller_id, category_id, name="Margherita", quantity=5, **extra):
    return current_domain.process(
        CreateProduct(
            name=name,
            description="Wood-fired, baked this morning",
            category_id=category_id,
            seller_id=seller_id,
            original_price=extra.pop("original_price", 200.0),
            discounted_price=extra.pop("discounted_price", 100.0),
            available_quantity=quantity,
            expiry_date=date(2030, 1, 1),
        ),
        asynchronous=False,
    )


class TestRegisterUser:
    def test_registers_and_hashes_password(self):
        user_id = _register()
        user = current_domain.repository_for(User).get(user_id)
        assert user.email == "seller@example.com"
        assert user.password_hash != "Secret123"
        assert user.password_hash.startswith("$2")

    def test_duplicate_email_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(email="Seller@Example.com")
        assert exc.value.messages["email"] == ["Email already taken"]


class TestAuthenticate:
    def test_valid_credentials_issue_token(self):
        user_id = _register()
        user, token = authenticate("seller@example.com", "Secret123")
        assert str(user.id) == user_id

        claims = decode_token(token)
        assert claims["userId"] == user_id
        assert claims["role"] == "seller"
        assert claims["exp"] - claims["iat"] == 7 * 24 * 3600

    def test_wrong_password(self):
        _register()
        with pytest.raises(InvalidCredentialsError):
            authenticate("seller@example.com", "wrong")

    def test_unknown_email(self):
        with pytest.raises(InvalidCredentialsError) as exc:
            authenticate("nobody@example.com", "Secret123")
        assert exc.value.message == "Invalid email or password"


class TestPreferences:
    def test_replaces_preferences(self):
        user_id = _register(role="user")
        result = current_domain.process(
            AddUserPreferences(user_id=user_id, user_preferences=json.dumps(["Pizza", "Sushi"])),
            asynchronous=False,
        )
        assert result == ["Pizza", "Sushi"]
        assert current_domain.repository_for(User).get(user_id).preferences == ["Pizza", "Sushi"]

    def test_unknown_user(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                AddUserPreferences(user_id="missing", user_preferences=json.dumps(["Pizza"])),
                asynchronous=False,
            )


class TestCategories:
    def test_duplicate_name_rejected(self):
        _category()
        with pytest.raises(ValidationError):
            _category()

    def test_chips_put_requested_category_first(self):
        bakery = _category("Bakery", "🥐")
        pizza = _category("Pizza")
        chips = chip_categories(pizza)
        assert [str(c.id) for c in chips] == [pizza, bakery]

    def test_chips_without_selection_are_sorted_by_name(self):
        _category("Pizza")
        _category("Bakery", "🥐")
        assert [c.name for c in chip_categories()] == ["Bakery", "Pizza"]


class TestCreateProduct:
    def test_lists_product_under_category(self):
        seller_id = _register()
        category_id = _category()

        product_id = _list_product(seller_id, category_id)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.discount_percentage == 50.0
        category = current_domain.repository_for(Category).get(category_id)
        assert category.members == [product_id]

    def test_only_sellers_can_list(self):
        buyer_id = _register(email="buyer@example.com", role="user")
        category_id = _category()
        with pytest.raises(ValidationError) as exc:
            _list_product(buyer_id, category_id)
        assert exc.value.messages["sellerId"] == ["Only sellers can add products"]

    def test_unknown_category(self):
        seller_id = _register()
        with pytest.raises(ValidationError) as exc:
            _list_product(seller_id, "missing")
        assert "category" in exc.value.messages


class TestProductQueries:
    def test_find_by_name_excludes_callers_listings(self):
        seller_id = _register()
        other_id = _register(email="other@example.com")
        category_id = _category()
        _list_product(seller_id, category_id, name="Pizza")
        theirs = _list_product(other_id, category_id, name="Pizza")
        _list_product(other_id, category_id, name="Sushi")

        found = current_domain.repository_for(Product).find_by_name("Pizza", exclude_seller_id=seller_id)

        assert [str(p.id) for p in found] == [theirs]

    def test_find_by_ids_preserves_order_and_skips_unknown(self):
        seller_id = _register()
        category_id = _category()
        first = _list_product(seller_id, category_id, name="Pizza")
        second = _list_product(seller_id, category_id, name="Sushi")

        found = current_domain.repository_for(Product).find_by_ids([second, "missing", first])

        assert [str(p.id) for p in found] == [second, first]


class TestUpdateStock:
    def test_sets_absolute_quantity(self):
        product_id = _list_product(_register(), _category())
        product = current_domain.process(
            UpdateProductStock(product_id=product_id, available_quantity=2), asynchronous=False
        )
        assert product.available_quantity == 2
        assert current_domain.repository_for(Product).get(product_id).available_quantity == 2

    def test_zero_persists_sold_out(self):
        product_id = _list_product(_register(), _category())
        current_domain.process(UpdateProductStock(product_id=product_id, available_quantity=0), asynchronous=False)
        assert current_domain.repository_for(Product).get(product_id).status == ProductStatus.SOLD_OUT.value

    def test_negative_rejected(self):
        product_id = _list_product(_register(), _category())
        with pytest.raises(ValidationError):
            current_domain.process(
                UpdateProductStock(product_id=product_id, available_quantity=-1), asynchronous=False
            )


class TestPlaceOrder:
    def _order(self, product_id, quantity):
        return current_domain.process(
            PlaceOrder(
                booked_by_id="buyer-1",
                product_id=product_id,
                quantity=quantity,
                price=quantity * 100.0,
                payment_method="Cash",
            ),
            asynchronous=False,
        )

    def test_places_order_without_touching_stock(self):
        product_id = _list_product(_register(), _category(), quantity=5)

        order_id = self._order(product_id, 3)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.quantity == 3
        assert order.price == 300.0
        assert order.status == "Placed"
        assert current_domain.repository_for(Product).get(product_id).available_quantity == 5

    def test_more_than_stock_is_out_of_stock(self):
        product_id = _list_product(_register(), _category(), quantity=2)
        with pytest.raises(ValidationError) as exc:
            self._order(product_id, 3)
        assert exc.value.messages["quantity"] == ["Out of stock"]

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            self._order("missing", 1)

    def test_zero_quantity_rejected(self):
        product_id = _list_product(_register(), _category())
        with pytest.raises(ValidationError):
            self._order(product_id, 0)
