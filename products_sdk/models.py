# products_sdk/models.py
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ProductIn(BaseModel):
    name: str
    category: str
    price: float


class ApiResponse(BaseModel):
    status_code: int
    data: Any = None


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    PARSE = "parse"
    STATUS = "status"


class Failure(BaseModel):
    kind: ErrorKind
    operation: str
    message: str
    status_code: Optional[int] = None


NEW_PRODUCT = ProductIn(name="Classic Leather Jacket", category="outer wear", price=299.99)
SALE_PRODUCT = ProductIn(name="Classic Leather Jacket - SALE", category="outer wear", price=199.99)
