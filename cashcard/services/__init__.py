"""
Use cases for the cash card API.

Routers call these services instead of touching repositories directly. Each
service receives its store at construction time.
"""
