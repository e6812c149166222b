"""Tools for reading and reshaping schedule data."""
