"""Property administration GUI layer.

Binds the headless ``listview`` engine to PyQt6 and hosts the small set of
application services (event bus, service locator, settings) shared by the
admin tables.
"""
