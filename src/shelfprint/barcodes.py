from __future__ import annotations

import re
from enum import Enum
from typing import Mapping, Optional, Protocol, runtime_checkable

from .config import UrlBuilder
from .dto import Item
from .errors import ValidationError
from .layouts.base import AuxiliaryContent
from .logging import get_logger


"""
Barcode / QR collaborator interface.

Rasterizing codes is somebody else's job. ShelfPrint decides *which* code
an item gets and *what* it encodes, then asks a BarcodeProvider for opaque
content it places without interpreting.
"""

log = get_logger("barcodes")

DEFAULT_EAN13 = "1234567890123"

_NON_DIGITS = re.compile(r"[^0-9]")


class CodeType(Enum):
    EAN13 = "EAN-13"
    QR = "QR Code"
    NONE = "None"

    @classmethod
    def parse(cls, value: object) -> "CodeType":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for c in cls:
            if c.value.lower() == key:
                return c
        aliases = {"ean13": cls.EAN13, "qr": cls.QR, "qrcode": cls.QR, "": cls.NONE}
        try:
            return aliases[key.replace("-", "").replace(" ", "")]
        except KeyError:
            raise ValidationError(
                f"Unknown barcode type: {value!r}. Available: {', '.join(c.value for c in cls)}"
            )


def resolve_code_type(
    index: int,
    overrides: Optional[Mapping[int, object]],
    default: object = CodeType.NONE,
) -> CodeType:
    """Per-index override first, then the global default."""
    if overrides and index in overrides:
        return CodeType.parse(overrides[index])
    return CodeType.parse(default)


def ean13_payload(sku: Optional[str]) -> str:
    """
    Digits of the SKU/ISBN, left-padded or cut to 13.
    Fewer than 10 digits falls back to the default code.
    """
    digits = _NON_DIGITS.sub("", sku or "")
    if len(digits) < 10:
        log.debug("sku %r too short for EAN-13, using default", sku)
        return DEFAULT_EAN13
    if len(digits) < 13:
        return digits.rjust(13, "0")
    return digits[:13]


def code_payload(item: Item, code_type: CodeType, urls: UrlBuilder) -> Optional[str]:
    if code_type is CodeType.EAN13:
        return ean13_payload(item.sku)
    if code_type is CodeType.QR:
        return urls.product_url(item.handle)
    return None


@runtime_checkable
class BarcodeProvider(Protocol):
    """
    Return pre-rendered content for (item, code type), or None.
    `payload` is the value to encode (see code_payload()).
    """
    def render(self, item: Item, code_type: CodeType, payload: str) -> Optional[AuxiliaryContent]: ...


__all__ = [
    "DEFAULT_EAN13",
    "CodeType",
    "resolve_code_type",
    "ean13_payload",
    "code_payload",
    "BarcodeProvider",
]
