"""Locust integration for composed isochrone scenarios."""

from .locust_users import (
    IsochroneUser,
    OpenInjectionShape,
    build_user_class,
    build_user_classes,
    user_class_name,
)

__all__ = [
    "IsochroneUser",
    "OpenInjectionShape",
    "build_user_class",
    "build_user_classes",
    "user_class_name",
]
