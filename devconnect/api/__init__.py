"""
API layer for the DevConnect Backend.

Exposes HTTP endpoints under /api (auth, users, posts with likes and comments).
"""
