"""
HR Assistant data seeding.

Populates the MongoDB Atlas collection behind the HR assistant with synthetic
employee records, each stored with a readable summary and its embedding.

Components:
- seeding: record generation, summary rendering and vector store indexing
"""

__version__ = "1.0.0"
