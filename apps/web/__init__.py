"""
Pursuit Web Host.

Assembles the settings record at startup and serves the application with it.
"""
