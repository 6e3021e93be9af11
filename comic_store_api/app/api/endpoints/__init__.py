"""
Resource routers.

Each module defines a ``router`` object with the routes of one
resource.  They are included by ``api.router`` under their Italian
path prefixes (``/utenti``, ``/fumetti``, ``/wishlists``,
``/abbonamenti``).
"""
