"""Packaged translation catalogues.

This package holds Qt Linguist ``.ts`` files named ``<prefix>_<lang>.ts``
(e.g. ``mythbrowser_hu.ts``) that are accessed via importlib.resources.
Keeping this as a real package ensures the resources are discoverable both
locally and when installed.
"""
