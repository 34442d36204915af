"""Business logic for event registrations."""
