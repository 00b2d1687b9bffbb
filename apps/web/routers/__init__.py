"""Pursuit API Routers."""
