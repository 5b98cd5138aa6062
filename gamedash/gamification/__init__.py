"""Gamification module - profile records and the provider endpoint."""
