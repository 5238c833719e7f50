"""
Static demo data for the back office dashboard.

This package contains fixture records used by DemoResourceService for
development, testing, and demonstrations without a backend.

Modules:
- demo_records: Pre-populated records for every resource
"""
