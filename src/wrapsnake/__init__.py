"""Snake on a wrapped grid: simulation core plus a pygame front end."""
