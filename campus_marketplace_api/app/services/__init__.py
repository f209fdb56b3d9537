"""
Service layer abstraction.

Each service encapsulates business logic for a domain and owns the
transaction boundary for its operations.  API handlers call services;
services call repositories.
"""
