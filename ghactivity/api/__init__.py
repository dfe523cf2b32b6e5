"""ghactivity HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application exposing a user's GitHub activity views.

Usage
-----
Create and run the application::

    from ghactivity.api import create_app

    app = create_app()              # health-only mode
    app = create_app(dependencies)  # with activity endpoints

Public API
----------
create_app
    Application factory that configures the Falcon ASGI app with health
    endpoints and optionally the activity endpoints when an activity
    service is provided.
"""

from ghactivity.api.app import AppDependencies, create_app

__all__ = ["AppDependencies", "create_app"]
