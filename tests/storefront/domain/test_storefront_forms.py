"""Tests for client-side form validation."""

from datetime import date, timedelta

import pytest
from storefront.errors import FormValidationError
from storefront.forms import LoginForm, ProductForm, RegistrationForm, validate_form


def _registration(**overrides):
    data = {
        "email": "Hari@Example.com",
        "role": "user",
        "phone_number": "9800000000",
        "location": "Kathmandu",
        "password": "Secret123",
        "confirm_password": "Secret123",
    }
    data.update(overrides)
    return data


def _product(**overrides):
    data = {
        "name": "Margherita",
        "description": "Wood-fired, baked this morning",
        "category": "cat-1",
        "original_price": 200,
        "discounted_price": 150,
        "expiry_date": (date.today() + timedelta(days=2)).isoformat(),
        "available_quantity": 3,
    }
    data.update(overrides)
    return data


class TestLoginForm:
    def test_valid(self):
        form = validate_form(LoginForm, {"email": " Hari@Example.com ", "password": "Secret123"})
        assert form.email == "hari@example.com"

    def test_bad_email(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(LoginForm, {"email": "hari", "password": "x"})
        assert exc.value.errors["email"] == ["Invalid email address"]

    def test_missing_password(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(LoginForm, {"email": "hari@example.com", "password": ""})
        assert "password" in exc.value.errors

    @pytest.mark.parametrize("password", ["Sec1", "secret123", "SECRET123", "SecretOnly"])
    def test_weak_password_rejected_like_registration(self, password):
        with pytest.raises(FormValidationError) as exc:
            validate_form(LoginForm, {"email": "hari@example.com", "password": password})
        assert "password" in exc.value.errors


class TestRegistrationForm:
    def test_valid(self):
        form = validate_form(RegistrationForm, _registration())
        payload = form.to_payload()
        assert payload["email"] == "hari@example.com"
        assert payload["phoneNumber"] == "9800000000"
        assert "lat" not in payload

    def test_seller_coordinates_sent(self):
        form = validate_form(RegistrationForm, _registration(role="seller", lat=27.7, lng=85.3))
        assert form.to_payload()["lat"] == 27.7

    @pytest.mark.parametrize("password", ["short1A", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"])
    def test_weak_passwords(self, password):
        with pytest.raises(FormValidationError) as exc:
            validate_form(RegistrationForm, _registration(password=password, confirm_password=password))
        assert "password" in exc.value.errors

    def test_passwords_must_match(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(RegistrationForm, _registration(confirm_password="Secret124"))
        assert exc.value.errors["__all__"] == ["Passwords do not match"]

    def test_role_literal(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(RegistrationForm, _registration(role="Admin"))
        assert "role" in exc.value.errors

    @pytest.mark.parametrize("phone", ["(01) 555-0100", "+977 980 000 0000", "980-000-0000"])
    def test_phone_formats_accepted(self, phone):
        assert validate_form(RegistrationForm, _registration(phone_number=phone)).phone_number == phone

    def test_phone_too_short(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(RegistrationForm, _registration(phone_number="9800000"))
        assert exc.value.errors["phone_number"] == ["Phone number must be at least 10 digits"]

    def test_phone_with_letters(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(RegistrationForm, _registration(phone_number="98000-CALL"))
        assert exc.value.errors["phone_number"] == ["Invalid phone number"]

    def test_short_location(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(RegistrationForm, _registration(location="KT"))
        assert "location" in exc.value.errors


class TestProductForm:
    def test_derives_discount_percentage(self):
        form = validate_form(ProductForm, _product())
        assert form.to_payload("seller-1")["discountPercentage"] == 25.0

    def test_explicit_discount_percentage(self):
        form = validate_form(ProductForm, _product(discount_percentage=30))
        assert form.effective_discount_percentage == 30

    def test_discounted_above_original(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(ProductForm, _product(discounted_price=250))
        assert "__all__" in exc.value.errors

    def test_expiry_must_be_in_future(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(ProductForm, _product(expiry_date=date.today().isoformat()))
        assert exc.value.errors["expiry_date"] == ["Expiry date must be in the future"]

    def test_quantity_at_least_one(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(ProductForm, _product(available_quantity=0))
        assert "available_quantity" in exc.value.errors

    def test_description_length(self):
        with pytest.raises(FormValidationError) as exc:
            validate_form(ProductForm, _product(description="short"))
        assert "description" in exc.value.errors

    def test_status_literal(self):
        with pytest.raises(FormValidationError):
            validate_form(ProductForm, _product(status="archived"))
