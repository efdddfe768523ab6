"""Init file for status module."""

from cloudctl.controllers.status.controller import StatusController

__all__ = ["StatusController"]
