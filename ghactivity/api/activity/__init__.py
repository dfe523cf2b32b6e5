"""Activity view resources.

Usage
-----
Import activity resources for route registration::

    from ghactivity.api.activity.resources import ActivityResource, ViewResource
"""
