"""
Application package.

``core`` holds configuration, logging and database access, ``models``
the domain entities, ``repositories`` their SQLite persistence,
``services`` the business rules, ``schemas`` the request and response
bodies and ``api`` the HTTP routes.
"""
