"""
High-level use cases for the books API.

Each service module orchestrates repositories to implement the business
rules (id assignment, partial updates, availability filter). Routers call
these services instead of touching the store directly.
"""
