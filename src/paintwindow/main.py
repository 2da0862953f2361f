from paintwindow.server import app

__all__ = ["app"]
