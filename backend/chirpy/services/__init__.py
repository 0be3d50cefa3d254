"""
High-level use cases for the Chirpy API.

Each service orchestrates the document store and the ports (hashing, signing,
randomness) to implement business rules. Routers call these services instead
of touching the store file directly.
"""
