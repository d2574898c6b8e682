"""Product catalogue, carts and users of a small online store backed by a JSON API."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import requests

from demoapps.calculator import _format_number

BASE_URL = "https://fakestoreapi.com"
_TIMEOUT = 30

_FULL_STAR = "\u2605"
_EMPTY_STAR = "\u2606"
_MAX_STARS = 5


def _require(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None
    except TypeError:
        raise ValueError(f"expected an object, got {type(data).__name__}") from None


def _int(data: dict[str, Any], key: str) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field {key!r} must be a non-negative integer, got {value!r}")
    return value


def _float(data: dict[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _str(data: dict[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = _require(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list, got {value!r}")
    return value


def _parse_datetime(text: str) -> datetime:
    """Parse an RFC 3339 timestamp and convert it to UTC."""
    normalized = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no offset: {text!r}")
    return parsed.astimezone(timezone.utc)


def _round_half_away(value: float) -> int:
    """Round to nearest, halves away from zero, saturating at zero."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        raise ValueError("rating out of range")
    return math.floor(value + 0.5)


def _get_json(url: str) -> Any:
    return requests.get(url, timeout=_TIMEOUT).json()


@dataclass
class Rating:
    """Average score out of five and the number of votes behind it."""

    rate: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rating:
        return cls(rate=_float(data, "rate"), count=_int(data, "count"))

    def __str__(self) -> str:
        stars = _round_half_away(self.rate)
        if stars > _MAX_STARS:
            raise ValueError(f"rating {self.rate} exceeds {_MAX_STARS} stars")
        return (
            _FULL_STAR * stars
            + _EMPTY_STAR * (_MAX_STARS - stars)
            + f" ({_format_number(self.rate)}) ({self.count} ratings)"
        )


@dataclass
class Product:
    """A product listed in the store."""

    id: int = 0
    title: str = ""
    price: float = 0.0
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = field(default_factory=Rating)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        return cls(
            id=_int(data, "id"),
            title=_str(data, "title"),
            price=_float(data, "price"),
            description=_str(data, "description"),
            category=_str(data, "category"),
            image=_str(data, "image"),
            rating=Rating.from_dict(_require(data, "rating")),
        )

    def price_label(self) -> str:
        """The price as shown on product cards, e.g. ``$9.5``."""
        return f"${_format_number(self.price)}"


class Sort(Enum):
    """Ordering of product listings."""

    DESCENDING = "desc"
    ASCENDING = "asc"

    def __str__(self) -> str:
        return self.value


class Size(Enum):
    """Garment sizes offered on the product page."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Size:
        """Parse a size name, ignoring case."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown size: {text!r}") from None


@dataclass
class ProductInCart:
    """A product reference and how many of it a cart holds."""

    product_id: int
    quantity: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProductInCart:
        return cls(product_id=_int(data, "productId"), quantity=_int(data, "quantity"))

    def fetch_product(self) -> Product:
        return fetch_product(self.product_id)


@dataclass
class Cart:
    """A user's shopping cart at a point in time."""

    id: int
    user_id: int
    data: str
    products: list[ProductInCart]
    date: datetime

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cart:
        return cls(
            id=_int(data, "id"),
            user_id=_int(data, "userId"),
            data=_str(data, "data"),
            products=[ProductInCart.from_dict(item) for item in _list(data, "products")],
            date=_parse_datetime(_str(data, "date")),
        )

    def update_database(self) -> None:
        """Send the cart to the server and replace it with the server's copy."""
        response = requests.put(f"{BASE_URL}/carts/{self.id}", timeout=_TIMEOUT)
        updated = Cart.from_dict(response.json())
        self.id = updated.id
        self.user_id = updated.user_id
        self.data = updated.data
        self.products = updated.products
        self.date = updated.date


@dataclass
class FullName:
    firstname: str
    lastname: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FullName:
        return cls(firstname=_str(data, "firstname"), lastname=_str(data, "lastname"))


@dataclass
class User:
    """A store customer account."""

    id: int
    email: str
    username: str
    password: str
    name: FullName
    phone: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(
            id=_int(data, "id"),
            email=_str(data, "email"),
            username=_str(data, "username"),
            password=_str(data, "password"),
            name=FullName.from_dict(_require(data, "name")),
            phone=_str(data, "phone"),
        )

    def fetch_most_recent_cart(self) -> Cart | None:
        """The user's cart with the latest date; the last one listed wins ties."""
        latest: Cart | None = None
        for cart in fetch_user_carts(self.id):
            if latest is None or cart.date >= latest.date:
                latest = cart
        return latest


def fetch_user_carts(user_id: int) -> list[Cart]:
    payload = _get_json(
        f"{BASE_URL}/carts/user/{user_id}?startdate=2019-12-10&enddate=2023-01-01"
    )
    if not isinstance(payload, list):
        raise ValueError("expected a list of carts")
    return [Cart.from_dict(item) for item in payload]


def fetch_user(user_id: int) -> User:
    return User.from_dict(_get_json(f"{BASE_URL}/users/{user_id}"))


def fetch_product(product_id: int) -> Product:
    return Product.from_dict(_get_json(f"{BASE_URL}/products/{product_id}"))


def fetch_products(count: int, sort: Sort) -> list[Product]:
    payload = _get_json(f"{BASE_URL}/products/?sort={sort}&limit={count}")
    if not isinstance(payload, list):
        raise ValueError("expected a list of products")
    return [Product.from_dict(item) for item in payload]