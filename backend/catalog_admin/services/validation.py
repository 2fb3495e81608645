# backend/catalog_admin/services/validation.py
"""
Reglas de validación de entrada del catálogo.

Se evalúan en orden y gana el primer fallo. Todas se aplican antes de
cualquier llamada a la base de datos, así que una petición inválida nunca
produce escrituras.

Límites de longitud autoritativos (aplicados aquí y no en la UI):
- name: 255, imageUrl: 255, description: 500
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, List, Optional, Tuple

from catalog_admin.core.exceptions import ValidationError
from catalog_admin.schemas import product_schema

MAX_NAME_LENGTH = 255
MAX_IMAGE_URL_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 500

PRICE_QUANTUM = Decimal("0.01")  # Numeric(10, 2)
MAX_PRICE = Decimal("99999999.99")

# Rango de la columna Integer (32 bits)
MIN_INTEGER = -(2 ** 31)
MAX_INTEGER = 2 ** 31 - 1


def _to_decimal(value: Any) -> Optional[Decimal]:
    """Convierte números y cadenas numéricas a Decimal; None si no es un número finito."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        candidate = str(value)
    elif isinstance(value, str) and value.strip():
        candidate = value.strip()
    else:
        return None
    try:
        number = Decimal(candidate)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _to_int(value: Any) -> Optional[int]:
    """
    Acepta enteros, floats integrales (5.0) y cadenas enteras ("5").
    None si no es entero o no cabe en una columna Integer.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        number = Decimal(value)
    else:
        number = _to_decimal(value)
    if number is None or not MIN_INTEGER <= number <= MAX_INTEGER:
        return None
    if number != number.to_integral_value():
        return None
    return int(number)


def _validate_name(value: Any, message: str) -> str:
    # Sin trim: "  " es un nombre válido en esta capa
    if not isinstance(value, str) or not value or len(value) > MAX_NAME_LENGTH:
        raise ValidationError("name", message)
    return value


def validate_category_name(value: Any) -> str:
    return _validate_name(value, "Invalid category name")


def validate_price(value: Any) -> Decimal:
    """
    Precio obligatorio y estrictamente positivo.

    Un precio ausente (None) y un precio <= 0 producen el mismo error,
    así que 0 nunca es un precio válido. Se redondea a dos decimales antes
    de comparar para que lo almacenado también cumpla price > 0. El máximo
    es el de la columna Numeric(10, 2).
    """
    number = _to_decimal(value)
    if number is None or number > MAX_PRICE:
        raise ValidationError("price", "Invalid price")
    try:
        number = number.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError("price", "Invalid price")
    if number <= 0:
        raise ValidationError("price", "Invalid price")
    return number


def validate_stock_quantity(value: Any) -> int:
    # 0 es válido: la comprobación de presencia es explícita
    if value is None:
        raise ValidationError("stockQuantity", "Invalid stock quantity")
    number = _to_int(value)
    if number is None or number < 0:
        raise ValidationError("stockQuantity", "Invalid stock quantity")
    return number


def validate_image_url(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or len(value) > MAX_IMAGE_URL_LENGTH:
        raise ValidationError("imageUrl", "Invalid imageUrl")
    return value


def validate_description(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or len(value) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError("description", "Invalid description")
    return value


def normalize_category_ids(value: Any) -> List[int]:
    """
    Lista de IDs de categoría sin duplicados, en orden de primera aparición.
    Cualquier valor que no sea una lista se interpreta como "sin asociaciones".
    """
    if not isinstance(value, list):
        return []
    category_ids = []
    for item in value:
        category_id = _to_int(item)
        if category_id is None:
            raise ValidationError("categoryIds", "Invalid categoryIds")
        category_ids.append(category_id)
    return list(dict.fromkeys(category_ids))


def parse_category_filter(value: Any) -> Optional[int]:
    """
    Filtro categoryId del listado. Vacío o 0 equivalen a no filtrar.

    Raises:
        ValidationError: si el valor no es un ID entero
    """
    if value is None or value == "":
        return None
    category_id = _to_int(value)
    if category_id is None:
        raise ValidationError("categoryId", "Invalid categoryId")
    return category_id or None


def validate_product_payload(payload: product_schema.ProductPayload) -> product_schema.ProductData:
    """
    Valida el cuerpo de creación/actualización de un producto.

    Orden: name, price, stockQuantity, imageUrl, description, categoryIds.

    Raises:
        ValidationError: con el campo y el mensaje del primer fallo
    """
    name = _validate_name(payload.name, "Invalid product name")
    price = validate_price(payload.price)
    stock_quantity = validate_stock_quantity(payload.stock_quantity)
    image_url = validate_image_url(payload.image_url)
    description = validate_description(payload.description)
    category_ids = normalize_category_ids(payload.category_ids)

    return product_schema.ProductData(
        name=name,
        description=description,
        price=price,
        stock_quantity=stock_quantity,
        image_url=image_url,
        category_ids=category_ids,
    )


def pagination_window(page: int, page_size: int) -> Tuple[int, int]:
    """Devuelve (skip, take) para una página 1-indexada. No rechaza valores fuera de rango."""
    return (page - 1) * page_size, page_size
