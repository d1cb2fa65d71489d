"""Area model.

An area is one managed repository, identified by a stable label.
The filesystem path for each area comes from configuration.
"""

from enum import Enum


class Area(str, Enum):
    """Managed repositories.

    Attributes:
        CORE: Sofie server core.
        GATEWAY_INEWS: iNEWS FTP gateway.
        BLUEPRINTS: Sofie blueprints for iNEWS.
        TSR: State timeline resolver.
    """

    CORE = "CORE"
    GATEWAY_INEWS = "GATEWAY_INEWS"
    BLUEPRINTS = "BLUEPRINTS"
    TSR = "TSR"

    def __str__(self) -> str:
        return self.value
