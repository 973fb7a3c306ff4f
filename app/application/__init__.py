"""
Application layer package.

Contains the services that orchestrate domain logic.
This layer depends on domain ports, never on infrastructure.
"""
