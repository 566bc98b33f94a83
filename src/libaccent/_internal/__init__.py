"""Internal APIs for libaccent. No stability guarantees."""
