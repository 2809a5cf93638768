"""
Career Services Portal
Student career-services backend: opportunities, applications, goals,
skill tracking and admin analytics over a relational database.
"""

__version__ = "1.0.0"
