"""Infrastructure adapters: logging, playerctl processes and HTTP."""
