"""Host-side plumbing shared by the snailfish kernels and CLI."""
