"""Style injection engine for generated HTML report trees."""

from .classify import classify
from .injector import StyleInjector, inject_all
from .markers import SENTINEL, StyleBlock
from .resources import known_assets, provision_resources

__all__ = [
    "SENTINEL",
    "StyleBlock",
    "StyleInjector",
    "classify",
    "inject_all",
    "known_assets",
    "provision_resources",
]
