"""Goal engine, analytics, report composition and persistence services."""
