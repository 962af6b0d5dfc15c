"""Liveness, readiness and service summary resources.

Usage
-----
Import health resources for route registration::

    from meridus.api.health.resources import (
        HealthResource,
        ReadyResource,
        RootResource,
    )
"""
