"""Data models for kubetopo."""
