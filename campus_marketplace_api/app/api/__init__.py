"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``main`` mounts it under the
configured API prefix.
"""
