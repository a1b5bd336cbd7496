"""Static reference catalogs.

Each module holds a literal payload (plain dicts) that
``nursing_tutor.registry`` validates into pydantic models once per process.
"""
