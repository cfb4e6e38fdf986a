"""Workout templates and session logging API."""
