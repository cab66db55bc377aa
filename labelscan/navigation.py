"""
Map-service deep links for an extracted address.

The address is plain comma-separated text; it is percent-encoded here the
way browsers' encodeURIComponent does it, so the same links open the
native apps on phones.

Usage:
    from labelscan.navigation import build_links

    links = build_links("JOHN SMITH, 42 HIGH STREET, LONDON, SW1A 1AA")
    links["waze"]  # 'https://waze.com/ul?q=JOHN%20SMITH%2C%2042...'
"""

import logging
from typing import Dict, Iterable, Optional
from urllib.parse import quote

from .exceptions import EmptyAddressError, UnknownServiceError

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

MAP_SERVICES: Dict[str, str] = {
    "google": "https://www.google.com/maps/search/?api=1&query={address}",
    "waze": "https://waze.com/ul?q={address}",
    # HERE WeGo web URL opens the app when installed
    "here": "https://wego.here.com/directions/drive/{address}",
    "apple": "https://maps.apple.com/?q={address}",
}


def encode_address(address: str) -> str:
    """Percent-encode an address for use inside a URL."""
    return quote(address, safe=_URI_COMPONENT_SAFE)


def build_link(address: str, service: str) -> str:
    """
    Build a deep link for one map service.

    Args:
        address: Final (possibly user-edited) address
        service: One of MAP_SERVICES ('google', 'waze', 'here', 'apple')

    Raises:
        EmptyAddressError: address is blank
        UnknownServiceError: service is not supported
    """
    template = MAP_SERVICES.get(service.lower())
    if template is None:
        raise UnknownServiceError(service)

    if not address or not address.strip():
        raise EmptyAddressError("No address to navigate to")

    return template.format(address=encode_address(address.strip()))


def build_links(address: str, services: Optional[Iterable[str]] = None) -> Dict[str, str]:
    """Build deep links for several services (all of them by default)."""
    selected = list(services) if services else list(MAP_SERVICES)
    links = {service.lower(): build_link(address, service) for service in selected}
    logger.debug(f"Built {len(links)} map link(s)")
    return links
