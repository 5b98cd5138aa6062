"""gamedash - gamification dashboard service."""
