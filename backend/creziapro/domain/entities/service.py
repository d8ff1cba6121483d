"""Domain entities for the service catalogue shown on the services page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingBand:
    """A labelled price range, e.g. ``Basic: 5000 – 15000``."""

    label: str
    min: float
    max: float


@dataclass(frozen=True)
class Service:
    """An offered service.

    ``icon`` is the name of a front-end icon (e.g. ``"Code"``); ``features``
    and ``pricing_bands`` keep the order the admin entered them in.
    """

    id: str
    title: str
    description: str
    icon: str
    features: tuple[str, ...] = ()
    pricing_bands: tuple[PricingBand, ...] = ()
