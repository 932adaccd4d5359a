"""FastAPI routes for the marketplace.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts). Reads go straight to the
repositories and are rendered by ``marketplace.product.views``.
"""

import json

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from marketplace.api.context import bearer_claims
from marketplace.api.schemas import (
    CreateCategoryRequest,
    CreatedResponse,
    CreateProductRequest,
    LoginRequest,
    LoginResponse,
    OrderResponse,
    PlaceOrderRequest,
    PreferencesResponse,
    RegisterRequest,
    RegisterResponse,
    StockUpdateResponse,
    UpdatePreferencesRequest,
    UpdateStockRequest,
)
from marketplace.category.management import CreateCategory, all_categories, chip_categories
from marketplace.order.placement import PlaceOrder
from marketplace.product.creation import CreateProduct
from marketplace.product.product import Product
from marketplace.product.stock import UpdateProductStock
from marketplace.product.views import product_card, product_cards
from marketplace.user.authentication import authenticate
from marketplace.user.preferences import AddUserPreferences
from marketplace.user.registration import RegisterUser
from marketplace.user.user import User

product_router = APIRouter(tags=["products"])
category_router = APIRouter(tags=["categories"])
order_router = APIRouter(tags=["orders"])
user_router = APIRouter(tags=["users"])


# --- Product endpoints ---


@product_router.get("/products")
async def list_products(
    name: str | None = None,
    user_id: str | None = Query(None, alias="userId"),
    seller_id: str | None = Query(None, alias="sellerId"),
):
    """Preference lookup by name, a seller's own catalog, or everything."""
    repo = current_domain.repository_for(Product)
    if name is not None:
        products = repo.find_by_name(name, exclude_seller_id=user_id)
    elif seller_id is not None:
        products = repo.find_by_seller(seller_id)
    else:
        products = repo.find_all()
    return product_cards(products)


@product_router.post(
    "/products", status_code=201, response_model=CreatedResponse, dependencies=[Depends(bearer_claims)]
)
async def create_product(body: CreateProductRequest) -> CreatedResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        category_id=body.category,
        seller_id=body.seller_id,
        original_price=body.original_price,
        discounted_price=body.discounted_price,
        discount_percentage=body.discount_percentage,
        available_quantity=body.available_quantity,
        expiry_date=body.expiry_date,
        is_available=body.is_available,
        status=body.status,
        image_name=body.image_name,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return CreatedResponse(message="Product added successfully", id=product_id)


@product_router.patch(
    "/products/update/{product_id}", response_model=StockUpdateResponse, dependencies=[Depends(bearer_claims)]
)
async def update_product_stock(product_id: str, body: UpdateStockRequest) -> StockUpdateResponse:
    command = UpdateProductStock(product_id=product_id, available_quantity=body.available_quantity)
    product = current_domain.process(command, asynchronous=False)
    return StockUpdateResponse(product=product_card(product))


@product_router.get("/product-search")
async def search_products(product_ids: str = Query("", alias="productIds")):
    """Batch lookup by comma-separated ids, returned in the order asked for."""
    ids = [pid.strip() for pid in product_ids.split(",") if pid.strip()]
    if not ids:
        return []
    return product_cards(current_domain.repository_for(Product).find_by_ids(ids))


# --- Category endpoints ---


@category_router.get("/categories")
async def list_categories():
    return [c.to_public_dict() for c in all_categories()]


@category_router.post("/categories", status_code=201, response_model=CreatedResponse)
async def create_category(body: CreateCategoryRequest) -> CreatedResponse:
    command = CreateCategory(name=body.name, emoji=body.emoji)
    category_id = current_domain.process(command, asynchronous=False)
    return CreatedResponse(message="Category created", id=category_id)


@category_router.get("/product-chips")
async def product_chips(category_id: str | None = Query(None, alias="categoryId")):
    """Chip bar contents; the first entry is the chip selected by default."""
    return [c.to_public_dict() for c in chip_categories(category_id)]


# --- Order endpoints ---


@order_router.post("/orders", status_code=201, response_model=OrderResponse, dependencies=[Depends(bearer_claims)])
async def place_order(body: PlaceOrderRequest) -> OrderResponse:
    command = PlaceOrder(
        booked_by_id=body.booked_by_id,
        product_id=body.product_id,
        quantity=body.quantity,
        price=body.price,
        payment_method=body.payment_method,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse(order_id=order_id)


# --- User endpoints ---


@user_router.post("/register", status_code=201, response_model=RegisterResponse)
async def register(body: RegisterRequest) -> RegisterResponse:
    command = RegisterUser(
        name=body.name or body.email.split("@", 1)[0],
        email=body.email,
        password=body.password,
        role=body.role,
        phone_number=body.phone_number,
        location=body.location,
        latitude=body.lat,
        longitude=body.lng,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return RegisterResponse(user_id=user_id)


@user_router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest):
    if not body.email or not body.password:
        return JSONResponse(status_code=400, content={"message": "Email and password are required"})

    user, token = authenticate(body.email, body.password)
    return LoginResponse(user=user.to_public_dict(), token=token)


@user_router.get("/users/{user_id}")
async def get_user(user_id: str):
    return current_domain.repository_for(User).get(user_id).to_public_dict()


@user_router.patch(
    "/users/{user_id}/add-preferences", response_model=PreferencesResponse, dependencies=[Depends(bearer_claims)]
)
async def add_preferences(user_id: str, body: UpdatePreferencesRequest):
    if body.user_preferences is None:
        return JSONResponse(status_code=400, content={"message": "Invalid preferences format"})

    command = AddUserPreferences(user_id=user_id, user_preferences=json.dumps(body.user_preferences))
    preferences = current_domain.process(command, asynchronous=False)
    return PreferencesResponse(user_preferences=preferences)
