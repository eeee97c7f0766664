"""
Data layer for TalentMatch.

Provides database connections, data models, and repository classes
for data access throughout the application.

Submodules:
- database: MongoDB connection management
- models: Pydantic data models/schemas
- repositories: Database reads
"""

from .database import DatabaseManager, get_database_manager

__all__ = [
    "DatabaseManager",
    "get_database_manager",
]
