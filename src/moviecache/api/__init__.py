"""HTTP surface for movie-cache."""
