"""HTTP surface of the language tools directory."""
