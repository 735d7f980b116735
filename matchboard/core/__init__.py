"""Core types shared by every matchboard module."""
