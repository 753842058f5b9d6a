"""
Web application package for the chess companion.

Provides a FastAPI-based REST API for asking the bot for a move, asking for
a hint, and evaluating a position. Run with: uvicorn web.app:app
"""
