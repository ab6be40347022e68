"""Lookup of logical resource names through the resource loaders."""

import logging

from config_locator.resource_loader import get_context_loader, get_system_loader

logger = logging.getLogger(__name__)


def locate_from_classpath(resource_name: str) -> str | None:
    """Find a resource with the context loader first, then the system loader.

    The first hit is returned as-is; results of both tiers are never merged.
    """
    loader = get_context_loader()
    if loader is not None:
        url = loader.get_resource(resource_name)
        if url is not None:
            logger.debug(
                "Loading configuration from the context loader (%s)", resource_name
            )
            return url

    url = get_system_loader().get_resource(resource_name)
    if url is not None:
        logger.debug("Loading configuration from the system loader (%s)", resource_name)
    return url
