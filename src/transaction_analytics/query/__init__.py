"""Request-side helpers: month/search filters and pagination."""
