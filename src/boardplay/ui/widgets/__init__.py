"""Small board widgets."""
