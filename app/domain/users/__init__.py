"""
Users bounded context — domain layer.

This module contains all domain logic for the users context:
- The User entity
- Validation rules (minimum age, date ranges, field shapes)
- The persistence port
- Domain errors
"""
