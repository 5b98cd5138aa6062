"""Dashboard module - the user-facing gamification page and its view state."""
