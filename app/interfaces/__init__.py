"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and input shape validation. No business logic belongs here.
Routes call the service and return responses.
"""
