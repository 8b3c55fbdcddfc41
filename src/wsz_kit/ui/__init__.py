"""Web preview."""

from wsz_kit.ui.app import create_app

__all__ = ["create_app"]
