"""Shipping options and fee lookup.

The table is fixed and lives in-process; fees are in Naira.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShippingOption:
    id: str
    name: str
    description: str
    areas: str
    delivery_time: str
    fee: float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "areas": self.areas,
            "deliveryTime": self.delivery_time,
            "fee": self.fee,
        }


SHIPPING_OPTIONS: tuple[ShippingOption, ...] = (
    ShippingOption(
        id="pickup",
        name="Pick Up",
        description="Pick up from our store location",
        areas="Store Location",
        delivery_time="Immediate",
        fee=0,
    ),
    ShippingOption(
        id="lagos-island",
        name="Lagos Island",
        description="Covering Chevron, Orchid, Ikorodu, Ikate, New Road, Ajah",
        areas="Island Areas",
        delivery_time="24 - 48 hours",
        fee=5000,
    ),
    ShippingOption(
        id="lagos-mainland",
        name="Lagos Mainland",
        description=(
            "Covering Ikeja, Orile, Yaba, Surulere, Ikotun, Lasu, Egbeda, Magodo, Igando, Ayobo and others"
        ),
        areas="Mainland Areas",
        delivery_time="24 - 48 hours",
        fee=3500,
    ),
    ShippingOption(
        id="inter-state",
        name="Inter State",
        description="Covering Benin, Abuja, Delta, Port Harcourt, Abia, Enugu, Imo, Calabar",
        areas="Other States",
        delivery_time="2 - 3 business days",
        fee=4500,
    ),
    ShippingOption(
        id="western-states",
        name="Western States",
        description="Covering Ibadan, Ilorin, Ondo, Ekiti, Osun, Ogun",
        areas="Western Nigeria",
        delivery_time="2 - 3 business days",
        fee=4000,
    ),
)

_OPTIONS_BY_ID = {option.id: option for option in SHIPPING_OPTIONS}


def option_for(code: str | None) -> ShippingOption | None:
    """Return the shipping option for an exact code match, or None."""
    if not code:
        return None
    return _OPTIONS_BY_ID.get(code)


def fee(code: str | None) -> float:
    """Shipping fee for a location code.

    Unknown codes resolve to 0, which makes an unrecognised location look like
    free shipping. Checkout does not rely on this: it rejects unknown codes
    through ``option_for``.
    """
    option = option_for(code)
    return option.fee if option else 0


def all_options() -> list[ShippingOption]:
    return list(SHIPPING_OPTIONS)
