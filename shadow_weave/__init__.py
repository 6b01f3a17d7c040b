"""Shadow Weave: seeded two-tone circuit weave textures."""
