"""RuneClicker combat resolution engine."""
