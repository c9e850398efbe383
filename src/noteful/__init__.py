"""Noteful notes, folders and tags API"""
__version__ = "1.0.0"
