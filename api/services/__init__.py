"""
High-level use cases for the Artistes API.

Each service module orchestrates repositories to implement business rules
(name uniqueness, existence checks, search). Routers call these services
instead of manipulating the JSON file directly.
"""
