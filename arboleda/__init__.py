"""Binary tree, integer stack and AVL-balanced word dictionary with interactive console menus."""

__version__ = "3.0.0"