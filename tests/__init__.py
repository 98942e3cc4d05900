"""
Only the root tests directory carries an __init__.py, so that helpers are importable
as `tests.helpers.*`. Subdirectories work as namespace packages (PEP 420).
"""
