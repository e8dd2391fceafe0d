"""Barcodes: a UPC-A code (four integer groups) or a QR code string."""

from __future__ import annotations

from typing import Annotated, Literal, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class UpcDigits(NamedTuple):
    number_system: int
    manufacturer: int
    product: int
    check: int


class Upc(BaseModel):
    """UPC-A: ``number_system manufacturer product check``, e.g. 8 85909 51226 3."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["upc"] = "upc"
    number_system: int = Field(ge=0, le=9)
    manufacturer: int = Field(ge=0, le=99_999)
    product: int = Field(ge=0, le=99_999)
    check: int = Field(ge=0, le=9)

    @classmethod
    def from_digits(cls, digits: UpcDigits) -> Upc:
        return cls(**digits._asdict())

    @property
    def digits(self) -> UpcDigits:
        return UpcDigits(self.number_system, self.manufacturer, self.product, self.check)


class QRCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["qr_code"] = "qr_code"
    code: str = Field(min_length=1)


Barcode = Annotated[
    Union[Upc, QRCode],
    Field(discriminator="kind"),
]

BARCODE_ADAPTER: TypeAdapter[Barcode] = TypeAdapter(Barcode)
