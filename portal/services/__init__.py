"""Portal business logic services."""
