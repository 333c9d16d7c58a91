"""simplecache configuration properties."""
