"""
Application layer for the users bounded context.

The user service coordinates domain rules and the repository port
to fulfill CRUD operations. No framework or infrastructure imports allowed.
"""
