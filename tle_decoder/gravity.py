"""
Gravity Model Selection

Maps gravity model names to the selectors understood by the sgp4 library.
The selected model decides which Earth radius, gravitational parameter and
zonal harmonics the SGP4 initializer uses.
"""

from enum import Enum
from typing import Union

from sgp4 import earth_gravity
from sgp4.api import WGS72, WGS72OLD, WGS84

from tle_decoder.errors import UnknownGravityModelError


class GravityModel(Enum):
    """Earth gravity models supported by SGP4"""

    WGS72OLD = WGS72OLD
    WGS72 = WGS72
    WGS84 = WGS84

    @property
    def constants(self) -> tuple:
        """Physical constants (tumin, mu, radiusearthkm, xke, j2, j3, j4, j3oj2)."""
        return getattr(earth_gravity, self.name.lower())


def select_gravity_model(name: Union[str, GravityModel]) -> GravityModel:
    """
    Look up a gravity model by name.

    Args:
        name: ``"wgs72old"``, ``"wgs72"`` or ``"wgs84"`` (any case), or a
            ``GravityModel`` which is returned unchanged

    Returns:
        The matching GravityModel

    Raises:
        UnknownGravityModelError: If the name matches no supported model
    """
    if isinstance(name, GravityModel):
        return name

    try:
        return GravityModel[name.strip().upper()]
    except (KeyError, AttributeError):
        raise UnknownGravityModelError(
            f"Unknown gravity model {name!r}; expected one of "
            f"{', '.join(m.name.lower() for m in GravityModel)}"
        ) from None
