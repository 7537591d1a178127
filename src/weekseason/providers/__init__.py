"""Weekly price sources, looked up by ``ProviderType``."""

from __future__ import annotations

import importlib

from weekseason.config import ProviderType
from weekseason.providers.base import BaseWeeklyProvider

# Dotted paths, so requests is only imported once Yahoo is configured.
PROVIDER_CLASSES: dict[ProviderType, str] = {
    ProviderType.YAHOO: "weekseason.providers.yahoo.YahooProvider",
    ProviderType.MOCK: "weekseason.providers.mock.MockProvider",
}


def create_provider(provider_type: ProviderType, **kwargs) -> BaseWeeklyProvider:
    """Build the weekly source for ``provider_type``.

    Keyword arguments go straight to the source's constructor, e.g.
    ``proxy_url`` and ``timeout_seconds`` for Yahoo or ``years`` for the
    synthetic mock.
    """
    module_path, cls_name = PROVIDER_CLASSES[provider_type].rsplit(".", 1)
    cls = getattr(importlib.import_module(module_path), cls_name)
    return cls(**kwargs)


__all__ = ["BaseWeeklyProvider", "PROVIDER_CLASSES", "create_provider"]
