"""A small pygame arcade demo: a walking duck, a splash screen, menus and a wireframe scene."""

__version__ = "0.1.0"