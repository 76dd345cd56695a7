"""
todolist-init - provisions the todolist MongoDB database.
"""
__version__ = "0.1.0"
