"""Routers exposed by the web application."""
