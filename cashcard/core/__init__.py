"""
Core utilities shared across the cash card API.

Configuration, logging setup and password hashing live here so that
routers/services do not read os.environ or touch argon2 directly.
"""
