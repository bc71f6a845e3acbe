"""Service packages: language catalog and translation providers."""
