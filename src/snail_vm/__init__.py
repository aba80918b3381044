"""Array-encoded snailfish numbers and their rewrite kernels."""
