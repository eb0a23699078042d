"""
High-level use cases for the citizen portal.

Each service module orchestrates a repository to implement the business rules
(register a citizen, delete a record, aggregate statistics). Routers call these
services instead of manipulating the storage directly.
"""
