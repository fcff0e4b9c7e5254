"""Business logic services used by handlers.

Services are imported lazily by handlers so a cold start only pays for the
knowledge base load when the FAQ route is actually hit.
"""

# Do NOT import services here - use lazy loading in handlers instead
