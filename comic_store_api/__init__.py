"""
Top-level package for the Comic Store API.

All functionality lives in submodules under ``app``; the ASGI
application is ``comic_store_api.app.main:app``.
"""

__all__ = []
