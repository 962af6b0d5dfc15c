"""Meridus HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that receives GitHub webhooks, forwarded Discord
interactions and administrative subscription calls.

Usage
-----
Create and run the application::

    from meridus.api import create_app

    app = create_app()              # in-memory state, no delivery
    app = create_app(dependencies)  # explicit collaborators

Public API
----------
create_app
    Application factory that wires the registry, dispatcher and command
    processor behind the HTTP routes.
"""

from meridus.api.app import AppDependencies, create_app

__all__ = ["AppDependencies", "create_app"]
