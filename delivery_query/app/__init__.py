"""
Application package initializer.

The package is organised into logical pieces: ``core`` holds
configuration and logging setup, ``schemas`` holds the Pydantic data
model for deliveries and the records derived from them, and
``services`` holds the query logic itself.
"""
