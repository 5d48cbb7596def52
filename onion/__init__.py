"""Onion-layers architecture diagram: rings, curved labels, and clipped connectors."""
