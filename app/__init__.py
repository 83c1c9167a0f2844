"""Employee Directory Service application."""
