"""Base controller package."""

from cloudctl.controllers.base.base_controller import BaseController, CloudAPI

__all__ = ["BaseController", "CloudAPI"]
