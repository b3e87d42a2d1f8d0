"""
Gym dashboard reporting package.

This package contains:
- Reporting core: date ranges, filtering, aggregation (`gymdash.reports`)
- Shared configuration and utilities (`gymdash.core`)
- Record models and the hosted backend client (`gymdash.db`)
- Telegram bot surface for the reports (`gymdash.bot`)
"""
