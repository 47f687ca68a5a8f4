"""
SQLAlchemy-backed persistence for medications, schedules and dose statuses.
"""
