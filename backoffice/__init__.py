"""Coaching marketplace back office."""
