"""
Infrastructure layer - external service integrations.

- http: authenticated httpx transport for the REST APIs
"""
