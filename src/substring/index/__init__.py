"""Translation of unit ranges into byte ranges."""
